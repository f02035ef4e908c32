"""Hardcoded data used when the generation service is unavailable."""

from models.interview import AnswerFeedback, QuestionSet

FALLBACK_QUESTIONS: dict[str, QuestionSet] = {
    "beginner": QuestionSet(
        technical=[
            "Explain the concept of variables and data types in programming.",
            "What is version control and why is it important?",
            "Describe the difference between front-end and back-end development.",
            "What are the basic HTTP methods and their purposes?",
            "Explain what a database is and give an example of when you would use one.",
        ],
        behavioral=[
            "Tell me about a time when you learned a new programming concept.",
            "Describe a group project you worked on and your role in it.",
            "How do you approach solving a coding problem you've never seen before?",
            "What do you do when you get stuck on a technical problem?",
            "Why are you interested in a career in this field?",
        ],
    ),
    "medium": QuestionSet(
        technical=[
            "Explain the concept of closures in JavaScript and provide a practical use case.",
            "What is the difference between SQL and NoSQL databases? When would you use each?",
            "Describe the SOLID principles in object-oriented programming.",
            "How does React's Virtual DOM work and what are its benefits?",
            "Explain the concept of CI/CD and its importance in modern software development.",
        ],
        behavioral=[
            "Tell me about a time when you had to debug a critical production issue under pressure.",
            "Describe a situation where you disagreed with a team member. How did you handle it?",
            "Share an example of a project where you had to learn a new technology quickly.",
            "How do you prioritize tasks when working on multiple projects with tight deadlines?",
            "Tell me about a time when you received constructive criticism. How did you respond?",
        ],
    ),
    "advanced": QuestionSet(
        technical=[
            "Design a scalable microservices architecture for a high-traffic e-commerce platform.",
            "Explain how you would implement a distributed caching system and handle cache invalidation.",
            "Describe the trade-offs between different database replication strategies.",
            "How would you design a system to handle 1 million concurrent WebSocket connections?",
            "Explain the CAP theorem and its implications for distributed system design.",
        ],
        behavioral=[
            "Describe a time when you had to lead a major architectural redesign. What challenges did you face?",
            "How do you mentor junior engineers and help them grow in their careers?",
            "Tell me about a time you had to make a critical technical decision with incomplete information.",
            "Describe your approach to managing technical debt in a large codebase.",
            "How do you handle conflict between engineering teams with different technical priorities?",
        ],
    ),
}


def fallback_questions(difficulty: str) -> QuestionSet:
    return FALLBACK_QUESTIONS.get(difficulty, FALLBACK_QUESTIONS["medium"])


def default_feedback() -> AnswerFeedback:
    return AnswerFeedback(
        score=75,
        feedback=(
            "Your answer has been received. For detailed feedback, ensure you're "
            "providing specific examples and clear explanations."
        ),
        strengths=["Answer submitted", "Timely response"],
        improvements=["Add specific metrics", "Include real examples", "Explain technical concepts clearly"],
        explanation="Default score - provide more details for accurate evaluation",
        score_source="default",
    )


DEFAULT_FOLLOW_UP = (
    "Can you elaborate on how you would handle a situation where the initial "
    "approach doesn't work as expected?"
)


def default_sample_answer(question: str) -> str:
    return f"""SAMPLE ANSWER:
When addressing "{question}", I would approach it by first understanding the core requirements and then applying systematic problem-solving.

DETAILED EXPLANATION:
• Start by clarifying the problem scope and constraints
• Break down complex problems into manageable components
• Apply relevant design patterns or architectural principles
• Consider edge cases and failure scenarios
• Optimize for performance, scalability, and maintainability

EXAMPLE SCENARIO:
• In my previous role, I implemented a caching solution using Redis
• This reduced API response times from 300ms to 50ms (83% improvement)
• The system handled 10,000+ concurrent users with 99.9% uptime

KEY POINTS TO REMEMBER:
• Always start with requirements clarification
• Discuss trade-offs between different approaches
• Include specific metrics and results
• Connect back to business impact"""
