# Prompt catalogue: topics, difficulty table and pure prompt builders.
# Builders take plain values and return strings, so each variant can be
# asserted on without a model or a database.

from __future__ import annotations

from typing import Dict, Optional

from grading import num_to_clean_str

DIFFICULTIES = ("easy", "medium", "hard")
DEFAULT_DIFFICULTY = "medium"
MAX_HINT_LEVEL = 3

PRIMARY_5_TOPICS = [
    "fractions",
    "decimals",
    "percentage",
    "ratio",
    "average",
    "rate and speed",
    "area and perimeter of composite figures",
    "volume of cubes and cuboids",
    "angles in geometric figures",
    "four operations with whole numbers up to 10 million",
    "word problems with money",
]

# {difficulty: {axis: description}}
DIFFICULTY_REQUIREMENTS: Dict[str, Dict[str, str]] = {
    "easy": {
        "numbers": "Use smaller numbers (up to 10,000 for whole numbers, simple fractions like 1/2, 1/4, 1/5)",
        "steps": "1-2 steps to solve",
        "complexity": "Simple, straightforward language suitable for Primary 5",
        "operations": "Focus on single operations or simple combinations",
        "decimals": "Up to 1 decimal place",
        "percentages": "Simple percentages like 10%, 25%, 50%",
        "ratio": "Simple ratios like 1:2, 2:3",
        "average": "Finding average of 3-4 numbers",
    },
    "medium": {
        "numbers": "Use moderate numbers (up to 1,000,000 for whole numbers, fractions with denominators up to 10)",
        "steps": "2-3 steps to solve",
        "complexity": "Clear language with Primary 5 mathematical vocabulary",
        "operations": "Combination of 2-3 operations following order of operations",
        "decimals": "Up to 2 decimal places",
        "percentages": "Common percentages like 15%, 20%, 25%, 40%, 50%, 75%",
        "ratio": "Ratios with 2-3 quantities, simple equivalent ratios",
        "average": "Finding average of 5-6 numbers, or finding missing value given average",
    },
    "hard": {
        "numbers": "Use larger numbers (up to 10,000,000 for whole numbers, mixed fractions, fractions with denominators up to 12)",
        "steps": "3-4 steps to solve",
        "complexity": "More complex scenarios with multiple conditions, Primary 5 level",
        "operations": "Multiple operations with brackets and order of operations",
        "decimals": "Up to 3 decimal places as per P5 syllabus",
        "percentages": "Any percentage values including increase/decrease problems",
        "ratio": "Complex ratio problems with 3 quantities, finding unknown values",
        "average": "Complex average problems with missing values or combined sets",
    },
}

# Axes that only apply to one topic
_TOPIC_AXES = {"ratio": "Ratio", "average": "Average"}

HINT_TIER_GUIDANCE = {
    1: "General guidance about what type of problem this is and what mathematical concepts to use. Don't give specific steps.",
    2: "More specific guidance about the steps needed, but don't do the calculations. Guide them on what operations to perform.",
    3: "Walk through the first major step with actual numbers, but let them complete the rest. Do not reveal the final answer.",
}


def normalize_difficulty(difficulty: Optional[str]) -> str:
    if isinstance(difficulty, str):
        d = difficulty.strip().lower()
        if d in DIFFICULTIES:
            return d
    return DEFAULT_DIFFICULTY


def _difficulty_lines(topic: str, difficulty: str) -> str:
    req = DIFFICULTY_REQUIREMENTS[difficulty]
    lines = [
        req["numbers"],
        req["steps"],
        req["complexity"],
        req["operations"],
        f"Decimals: {req['decimals']}",
        f"Percentages: {req['percentages']}",
    ]
    if topic in _TOPIC_AXES:
        lines.append(f"{_TOPIC_AXES[topic]}: {req[topic]}")
    return "\n".join(f"  * {line}" for line in lines)


def build_problem_prompt(topic: str, difficulty: str) -> str:
    difficulty = normalize_difficulty(difficulty)
    return f"""Generate a math word problem suitable for Primary 5 students (age 10-11) in Singapore, following the MOE Primary Mathematics Syllabus.

Topic: {topic}
Difficulty Level: {difficulty.upper()}

Primary 5 Syllabus Context:
- Students at this level work with whole numbers up to 10 million
- They understand fractions (all four operations), decimals (up to 3 decimal places), percentages
- They are introduced to ratio, average, rate and speed
- Geometry includes area/perimeter of composite figures, volume of cubes/cuboids, angles

Requirements:
- The problem should be realistic and engaging for 10-11 year old children
- Use Singapore context when appropriate (e.g., Singapore dollars, HDB flats, MRT, hawker centres)
- Difficulty specifications:
{_difficulty_lines(topic, difficulty)}
- Ensure the problem aligns with Primary 5 syllabus standards
- Make sure the difficulty truly matches the {difficulty} level

You must respond with ONLY a JSON object in this exact format:
{{
  "problem_text": "The complete word problem text here",
  "final_answer": numerical_answer_here
}}

The final_answer must be a single number (can be decimal or whole number).

Example response:
{{
  "problem_text": "Sarah bought 3 boxes of cookies. Each box contains 24 cookies. She gave 1/4 of all the cookies to her friends. How many cookies does Sarah have left?",
  "final_answer": 54
}}"""


def build_hint_prompt(
    problem_text: str, correct_answer: float, difficulty: Optional[str], hint_level: int
) -> str:
    tiers = "\n".join(f"- Hint {lvl}: {text}" for lvl, text in HINT_TIER_GUIDANCE.items())
    return f"""You are helping a Primary 5 student (age 10-11) solve this math problem:

Problem: "{problem_text}"
Correct Answer: {num_to_clean_str(correct_answer)}
Difficulty: {difficulty or DEFAULT_DIFFICULTY}
Hint Level: {hint_level} of {MAX_HINT_LEVEL}

Please generate a hint for this problem based on the hint level:
{tiers}

Your task: write Hint {hint_level}. {HINT_TIER_GUIDANCE[hint_level]}

Guidelines:
- Use simple, encouraging language appropriate for a 10-11 year old
- Don't give away the answer directly
- Be supportive and help build understanding
- For hint 3, you can show one calculation but not the final answer
- Keep the hint concise (2-3 sentences)
- Use Singapore context/terminology where appropriate

Respond with ONLY the hint text, no JSON or formatting."""


def build_feedback_prompt(
    problem_text: str,
    correct_answer: float,
    user_answer: float,
    hints_used: int,
    is_correct: bool,
) -> str:
    return f"""A Primary 5 student just attempted this math problem:

Problem: "{problem_text}"
Correct Answer: {num_to_clean_str(correct_answer)}
Student's Answer: {num_to_clean_str(user_answer)}
Hints Used: {hints_used}
Result: {"CORRECT" if is_correct else "INCORRECT"}

Please generate encouraging and educational feedback for the student.

Guidelines:
- Use simple, clear language appropriate for a 10-11 year old
- Be encouraging and positive, even if the answer is wrong
- If they used hints ({hints_used} hints), acknowledge it positively and encourage their problem-solving effort
- If correct: Congratulate them and briefly explain why their approach worked
- If incorrect:
  * Be supportive and encouraging
  * Give a hint about what went wrong without giving the full solution immediately
  * Suggest what to check or reconsider
  * Mention the correct answer and provide a brief explanation
- Keep the feedback concise (2-3 sentences)
- Use an encouraging tone throughout

Respond with ONLY the feedback text, no JSON or formatting."""
