"""
Marketing plan prompt renderer.
Turns a validated form submission into the prompt sent to the generation provider.
"""

from __future__ import annotations

from textwrap import dedent
from typing import List

from core.form import get, get_at, text
from core.models import FormSubmission

SECTION_HEADINGS = (
    "### 1. Executive Summary",
    "### 2. Foundational Business Identity",
    "### 3. Target Audience Deep Dive",
    "### 4. Core Messaging & Brand Voice",
    "### 5. Offerings to Promote",
    "### 6. Actionable Channel & Content Strategy",
    "### 7. KPIs & Measuring Success",
)

# Every section is always emitted, even with no data, so the model sees the same skeleton.
_HEADER_TEMPLATE = dedent("""
    You are an expert marketing strategist for a company called gibLink Ai. Your task is to generate a comprehensive, actionable AI Marketing Plan based ONLY on the following information provided by the user. The plan should be structured in Markdown format with clear headings and be encouraging and empowering in tone.

    **User's Primary Goal:**
    {primary_goal}

    ---

    ### 1. Executive Summary
    *A brief, high-level overview of the marketing plan, tailored to the user's primary goal.*

    ---

    ### 2. Foundational Business Identity
    *A summary of the core business details that will inform the marketing strategy.*
    - **Business Name:** {business_name}
    - **Vision Statement:** {vision_statement}
    - **Mission Statement:** {mission_statement}
    - **Core Values:** {core_values}
    - **Unique Value Proposition:** Our company is better than our primary competitor, {primary_competitor}, because {uvp_differentiator}.

    ---

    ### 3. Target Audience Deep Dive
    *A detailed look at the customer segments this plan will target.*
""")

_ICP_TEMPLATE = dedent("""
    **Ideal Customer Profile {number}: {segment}**
    - **Pain Points to Solve:** {pain_points}
    - **Where to Find Them (Watering Holes):** {watering_holes}
""")

_MESSAGING_TEMPLATE = dedent("""
    ---

    ### 4. Core Messaging & Brand Voice
    *How we will communicate. This defines the personality of our marketing.*
    - **Brand Voice:** We are {positive_1} but not {negative_1}. We are also {positive_2} but not {negative_2}.
    - **Core Content Pillars:** Our marketing content will revolve around these themes: {content_pillars}.

    ---

    ### 5. Offerings to Promote
    *The specific products or services at the center of this marketing plan.*
""")

_OFFERING_TEMPLATE = dedent("""
    - **Offering:** {offering}
    - **Key Benefit:** {key_benefit}
""")

_CLOSING_TEMPLATE = dedent("""
    ---

    ### 6. Actionable Channel & Content Strategy
    *A step-by-step plan for reaching the target audience, based on their goal and watering holes.*

    ---

    ### 7. KPIs & Measuring Success
    *How we will track our progress toward the primary goal of "{primary_goal}".*

    ---
    Now, generate the full marketing plan based on this structure.
""")


def _field(form: FormSubmission, key: str) -> str:
    return text(get(form, key))


def _repeated(form: FormSubmission, key: str) -> List[str]:
    """Entries of a repeated field; a scalar or missing field has none."""
    value = get(form, key)
    return value if isinstance(value, list) else []


def _render_icp_blocks(form: FormSubmission) -> str:
    blocks = []
    for index, segment in enumerate(_repeated(form, "icp_segment_name")):
        blocks.append(_ICP_TEMPLATE.format(
            number=index + 1,
            segment=segment,
            pain_points=get_at(form, "icp_pain_points", index),
            watering_holes=get_at(form, "icp_watering_holes", index),
        ))
    return "".join(blocks)


def _render_offering_blocks(form: FormSubmission) -> str:
    blocks = []
    for index, offering in enumerate(_repeated(form, "offering_name")):
        blocks.append(_OFFERING_TEMPLATE.format(
            offering=offering,
            key_benefit=get_at(form, "key_benefit", index),
        ))
    return "".join(blocks)


def render(form: FormSubmission) -> str:
    """
    Render the marketing plan prompt for a form submission.

    Args:
        form: Validated form submission

    Returns:
        Prompt text with all seven plan sections in fixed order
    """
    primary_goal = _field(form, "primary_marketing_goal")

    parts = [
        _HEADER_TEMPLATE.format(
            primary_goal=primary_goal,
            business_name=_field(form, "business_name"),
            vision_statement=_field(form, "vision_statement"),
            mission_statement=_field(form, "mission_statement"),
            core_values=_field(form, "core_values"),
            primary_competitor=_field(form, "primary_competitor"),
            uvp_differentiator=_field(form, "uvp_differentiator"),
        ),
        _render_icp_blocks(form),
        _MESSAGING_TEMPLATE.format(
            positive_1=_field(form, "brand_voice_positive_1"),
            negative_1=_field(form, "brand_voice_negative_1"),
            positive_2=_field(form, "brand_voice_positive_2"),
            negative_2=_field(form, "brand_voice_negative_2"),
            content_pillars=_field(form, "content_pillars"),
        ),
        _render_offering_blocks(form),
        _CLOSING_TEMPLATE.format(primary_goal=primary_goal),
    ]
    return "".join(parts)
