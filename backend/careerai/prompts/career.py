"""Prompt templates for career guidance.

Contains:
1. Career suggestions: delimited free-text output parsed by
   careerai.services.career_suggestions
2. Learning roadmap: schema-constrained JSON output
3. Resume feedback: markdown free text
4. Persona instructions for the mentor and interviewer chat sessions
"""

from careerai.schemas.profile import Profile

# Delimiter between suggestion blocks in the career suggestions output.
SUGGESTION_DELIMITER = "###"

# =============================================================================
# Career Suggestions
# =============================================================================

_CAREER_SUGGESTIONS_TEMPLATE = """Based on the following student profile, suggest 3 diverse and suitable career paths.
For each career, provide a brief description and the key skills required.
Format each suggestion exactly like this, separated by '###':

###
**Career:** [Career Name]
**Description:** [A brief description of the career]
**Key Skills:** [skill1, skill2, skill3]
###

Profile:
{profile_json}
"""


def build_career_suggestions_prompt(profile: Profile) -> str:
    """Build the career suggestions prompt.

    Args:
        profile: Submitted student profile.

    Returns:
        Prompt asking for '###'-delimited Career/Description/Key Skills blocks.
    """
    return _CAREER_SUGGESTIONS_TEMPLATE.format(
        profile_json=profile.model_dump_json(indent=2)
    )


# =============================================================================
# Learning Roadmap
# =============================================================================

_ROADMAP_TEMPLATE = """A student with the profile below wants to become a {target_role}.
Create a detailed, personalized learning roadmap with 5-7 milestones.
For each milestone, provide a title, type (course, project, certification, or task), a brief description, and one relevant online resource URL.

Profile: {profile_json}
"""


def build_roadmap_prompt(profile: Profile, target_role: str) -> str:
    """Build the learning roadmap prompt.

    Args:
        profile: Submitted student profile.
        target_role: Role the roadmap should lead to.

    Returns:
        Prompt for schema-constrained milestone generation.
    """
    return _ROADMAP_TEMPLATE.format(
        target_role=target_role,
        profile_json=profile.model_dump_json(indent=2),
    )


# =============================================================================
# Resume Feedback
# =============================================================================

_RESUME_FEEDBACK_TEMPLATE = """Act as a professional career coach. Review the following resume text and provide constructive feedback.
Focus on clarity, impact, and formatting. Provide the feedback in markdown format with headings for different sections like 'Overall Impression', 'Strengths', and 'Areas for Improvement'.

Resume Text:
---
{resume_text}
---
"""


def build_resume_feedback_prompt(resume_text: str) -> str:
    """Build the resume review prompt.

    Args:
        resume_text: Resume pasted by the student.

    Returns:
        Prompt asking for sectioned markdown feedback.
    """
    return _RESUME_FEEDBACK_TEMPLATE.format(resume_text=resume_text)


# =============================================================================
# Chat Personas
# =============================================================================

MENTOR_SYSTEM_INSTRUCTION = (
    "You are a friendly and encouraging AI career mentor for students. "
    "Your goal is to provide guidance, answer questions about careers and "
    "skills, and help students stay motivated on their learning path. "
    "Keep your answers concise and actionable."
)

_INTERVIEWER_TEMPLATE = """You are an AI interviewer conducting a mock interview for a '{target_role}' position.
Start with a common opening question. After the user answers, provide brief, constructive feedback on their response, and then ask the next relevant question.
Keep the interview flowing. Ask a mix of behavioral, technical, and situational questions. Your feedback should be formatted using markdown."""

# Scripted first user turn that makes the interviewer open the session.
INTERVIEW_OPENING_MESSAGE = "Let's begin the interview. Ask me the first question."


def build_interviewer_instruction(target_role: str) -> str:
    """Build the interviewer persona for a target role.

    Args:
        target_role: Role being interviewed for.

    Returns:
        System instruction for the interview chat session.
    """
    return _INTERVIEWER_TEMPLATE.format(target_role=target_role)
