"""Prompt templates for interview question and concept generation.

Caller values are embedded verbatim; length limits are enforced by the
request schemas before a prompt is ever built.
"""

from __future__ import annotations


def build_question_answer_prompt(
    role: str,
    experience: int | str,
    topics_to_focus: str,
    number_of_questions: int,
) -> str:
    return (
        "You are an AI trained to generate technical interview questions and answers.\n"
        "\n"
        "Task:\n"
        f"- Role: {role}\n"
        f"- Candidate Experience: {experience} years\n"
        f"- Focus Topics: {topics_to_focus}\n"
        f"- Write {number_of_questions} interview questions.\n"
        "- For each question, generate a detailed but beginner-friendly answer.\n"
        "- If the answer needs a code example, add a small code block inside.\n"
        "- Keep formatting very clean.\n"
        "- Return a pure JSON array like:\n"
        "[\n"
        "  {\n"
        '    "question": "Question here?",\n'
        '    "answer": "Answer here."\n'
        "  },\n"
        "  ...\n"
        "]\n"
        "Important: Do NOT add any extra text. Only return valid JSON."
    )


def build_concept_explanation_prompt(question: str) -> str:
    return (
        "You are an AI trained to generate explanations for a given interview question.\n"
        "\n"
        "Task:\n"
        "- Explain the following interview question and its concept in depth as if "
        "you're teaching a beginner developer.\n"
        f'- Question: "{question}"\n'
        "- After the explanation, provide a short and clear title that summarizes "
        "the concept for the article or page header.\n"
        "- If the explanation includes a code example, provide a small code block.\n"
        "- Keep the formatting very clean and clear.\n"
        "- Return the result as a valid JSON object in the following format:\n"
        "\n"
        "{\n"
        '    "title": "Short title here?",\n'
        '    "explanation": "Explanation here."\n'
        "}\n"
        "\n"
        "Important: Do NOT add any extra text outside the JSON format. "
        "Only return valid JSON."
    )


__all__ = ["build_question_answer_prompt", "build_concept_explanation_prompt"]
