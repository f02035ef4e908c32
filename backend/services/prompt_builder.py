"""All prompt templates for Gemini API calls."""

DIFFICULTY_GUIDANCE: dict[str, str] = {
    "beginner": "Generate basic, fundamental questions suitable for entry-level/junior positions.",
    "medium": "Generate practical, experience-based questions suitable for mid-level positions.",
    "advanced": "Generate complex, system-level and leadership questions suitable for senior/expert positions.",
}


def build_questions_prompt(resume_text: str, job_description: str, difficulty: str) -> str:
    """Call A: five technical and five behavioral questions personalised to the resume."""
    target = (
        f"Target Job Description: {job_description}"
        if job_description.strip()
        else "Generate questions for a general technical role"
    )

    return f"""You are an expert interview coach. Analyze the resume provided and generate personalized interview questions.

Resume Content:
{resume_text}

{target}

{DIFFICULTY_GUIDANCE.get(difficulty, "")}

IMPORTANT: Analyze the resume content carefully and generate TWO SEPARATE types of questions based on the candidate's experience, skills, and projects mentioned in their resume:

1. TECHNICAL QUESTIONS (5 questions):
   - Focus on technical skills, technologies, and tools mentioned in the resume
   - Ask about projects, architectures, and technical decisions they made
   - Reference specific technologies from their resume
   - Difficulty level: {difficulty}

2. BEHAVIORAL QUESTIONS (5 questions):
   - Focus on past experiences, challenges, and achievements from their resume
   - Use STAR method format (Situation, Task, Action, Result)
   - Reference specific projects or roles from the resume

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "technicalQuestions": [<5 technical questions based on the resume>],
  "behavioralQuestions": [<5 behavioral questions based on the resume>]
}}"""


def build_scoring_prompt(question: str, answer: str) -> str:
    """Call B: 0-100 score plus feedback for one answer."""
    return f"""You are a strict technical interview evaluator. Analyze this interview answer and provide ACCURATE scoring from 0-100.

Question: {question}
Answer: {answer}

SCORING RUBRIC (follow strictly):
- 90-100: Excellent - Clear, detailed, specific examples, correct technical depth
- 80-89: Good - Covers main points, some examples, mostly correct
- 70-79: Average - Basic understanding, vague, lacks examples
- 60-69: Below Average - Incomplete, technical inaccuracies
- Below 60: Poor - Major gaps or incorrect information

Respond with ONLY valid JSON (no markdown) in this exact structure:
{{
  "score": <integer 0-100>,
  "feedback": "<2-3 sentences of specific feedback>",
  "strengths": [<specific strengths>],
  "improvements": [<specific improvements>],
  "ratingExplanation": "<brief explanation of why this score>"
}}"""


def build_sample_answer_prompt(question: str) -> str:
    """Call C: a model answer laid out in titled sections for the formatter."""
    return f"""You are an expert technical interviewer. Provide a COMPLETE SAMPLE ANSWER for this interview question that would score 95+/100.

Question: {question}

FORMAT THE ANSWER AS FOLLOWS:
SAMPLE ANSWER:
[Start with a complete paragraph introducing your approach]

DETAILED EXPLANATION:
• [Break down the key components]
• [Include specific examples]
• [Mention technologies/tools used]

EXAMPLE SCENARIO:
• [Describe a real project/situation]
• [Include numbers/metrics/results]
• [Explain your role and actions]

KEY POINTS TO REMEMBER:
• [Summarize critical elements]
• [Common pitfalls to avoid]

Make the answer 250-400 words, professional but conversational, with specific numbers and real technologies."""


def build_follow_up_prompt(question: str, answer: str) -> str:
    """Call D: a single deeper follow-up question."""
    return f"""You are an expert interviewer. Based on the candidate's answer, generate a relevant follow-up question that digs deeper.

Original Question: {question}
Candidate's Answer: {answer}

Generate one thoughtful follow-up question that helps explore their understanding further or clarifies specific points. Respond with the question only."""
