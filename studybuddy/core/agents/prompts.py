"""
Prompts for summaries and quiz generation.
"""

# ============= Summary Prompts =============

NOTE_SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful study assistant. Summarize study notes into exactly 5 clear, "
    "concise bullet points. Each bullet point should capture one key concept. "
    "Return only the bullet points, no introduction or extra text."
)

NOTE_SUMMARY_USER_PROMPT = """Summarize these study notes:

{body}"""


PDF_SUMMARY_SYSTEM_PROMPT = (
    "You are a helpful study assistant. Summarize the given PDF content into exactly "
    "6 clear bullet points. Each bullet point must start with \"• \". Focus on the most "
    "important concepts a student needs to know. Return only bullet points, nothing else."
)

PDF_SUMMARY_USER_PROMPT = """Summarize this PDF content:

{text}"""


# ============= Quiz Generation Prompts =============

QUIZ_GENERATION_SYSTEM_PROMPT = """You are a quiz generator for students. Given study material, generate exactly {count} multiple-choice questions to test understanding.

Return ONLY a valid JSON array with this exact format (no markdown, no code fences, no extra text):
[
  {{
    "question": "What is ...?",
    "options": ["Option A", "Option B", "Option C", "Option D"],
    "correctIndex": 0
  }}
]

Rules:
- Exactly {count} questions
- Exactly {options} options each
- correctIndex is 0-{last_index} (index of the correct option)
- Questions should test understanding, not just memorization
- Mix difficulty levels
- Return ONLY the JSON array, nothing else"""


QUIZ_GENERATION_USER_PROMPT = """Generate a quiz from this study material:

{material}"""
