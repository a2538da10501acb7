"""Prompt templates for quiz generation.

Two prompts drive a generation request: the analysis prompt turns free
text into {topic, questionCount}, the quiz prompt asks for the quiz itself.
"""


def get_analysis_prompt(text: str) -> str:
    """Build the prompt that extracts topic and question count from user text."""

    return f"""
"{text}"
- **Text Analysis**: Analyze the user's input and extract the topic and question count.
- **Response Format**: Return the topic and question count as a JSON object with the following structure:
{{
  "topic": "Quiz topic here",
  "questionCount": 5
}}
"""


def get_quiz_prompt(topic: str, question_count: int) -> str:
    """Build the prompt that generates the quiz JSON."""

    return f"""Create a quiz of multiple-choice questions on the topic of "{topic}".
- **Number of Questions**: {question_count}.
- **Language Detection**: Ensure that the quiz is created in the correct language based on the topic.
- **Response Format**: Format the quiz as a JSON object with the following structure:
{{
  "title": "Quiz title here",
  "description": "Brief description of the quiz",
  "questions": [
    {{
      "question": "Question text",
      "options": ["Option A", "Option B", "Option C", "Option D"],
      "correctAnswer": 0, // Index of the correct answer in the options array
      "explanation": "Explanation of the correct answer"
    }}
  ]
}}
"""
