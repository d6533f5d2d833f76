"""Prompt templates for the main prompt and its stylistic alternatives."""

from typing import List

from promptmaster.pipeline import EnhancedInput, describe_length, describe_tone


def build_generation_prompt(
    item: EnhancedInput, content_type: str, purpose_context: str
) -> str:
    """
    Main prompt template:
    - Opens with tone, content type and title in a single instruction
    - States the inferred goal, then numbered requirements
    - Ends with audience, length, style and focus guidelines
    """
    return f"""Create a {item.tone} {content_type} about {item.title}.
{purpose_context}

Key Requirements:
1. Use clear, {item.tone} language suitable for all audiences
2. Include relatable examples and practical applications
3. Maintain an engaging and accessible tone throughout
4. Structure the content logically with clear transitions

Additional Guidelines:
- Target Audience: General audience, including beginners
- Length: {describe_length(item.length)}
- Writing Style: {describe_tone(item.tone)}
- Key Focus: {item.context}"""


def build_alternative_prompts(
    item: EnhancedInput, content_type: str, purpose_context: str
) -> List[str]:
    """Return the educational, Q&A and narrative variants, in that order."""
    length_description = describe_length(item.length)

    educational = f"""Create an educational {content_type} that makes {item.title} easy to understand:

Approach:
• Begin with simple, familiar concepts
• Use relatable examples from everyday life
• Include step-by-step explanations
• Add helpful visuals or diagrams where possible

Target Length: {length_description}
Main Goal: {purpose_context}"""

    question_answer = f"""Develop an interactive guide about {item.title} using a question-and-answer format:

Structure:
1. Start with common questions beginners often ask
2. Provide clear, straightforward answers
3. Include practical examples and scenarios
4. Address potential misconceptions

Style: Conversational and approachable
Focus: {item.purpose}"""

    narrative = f"""Write an engaging narrative about {item.title} that connects with readers:

Elements to Include:
- Begin with a relatable situation or problem
- Explain concepts through storytelling
- Share real-world applications
- Conclude with practical takeaways

Format: {length_description}
Goal: Make {item.title} accessible and interesting for everyone"""

    return [educational, question_answer, narrative]
