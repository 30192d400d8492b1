"""
Common prompt components and instructions.

Reusable prompt snippets that can be composed into full prompts.
"""
from ..constants import IssueCategory

# ============================================================================
# JSON OUTPUT INSTRUCTIONS
# ============================================================================

JSON_OUTPUT_STRICT = """
**CRITICAL: OUTPUT FORMAT**
- Return ONLY valid JSON, no explanations before or after
- No markdown code blocks (no ```json```)
- Ensure proper JSON escaping for quotes and special characters
- Structure must exactly match the schema provided
"""

# ============================================================================
# COMMON ANALYSIS PRINCIPLES
# ============================================================================

OBJECTIVITY_INSTRUCTION = """
**OBJECTIVITY REQUIREMENT**
- Remain strictly neutral and factual
- Do not inject personal opinions or biases
- Extract only what is explicitly stated or clearly implied
"""

# ============================================================================
# SCHEMAS
# ============================================================================

ISSUE_CATEGORIES = ", ".join(category.value for category in IssueCategory)

SCHEMA_ISSUE = f"""{{
    "title": "Short title of the issue",
    "description": "Brief description of the issue and sentiment.",
    "category": "One of: {ISSUE_CATEGORIES}"
}}"""

SCHEMA_LOCATION = """{
    "city": "City where the meeting took place (null if unknown)",
    "county": "County (null if unknown)",
    "state": "Two-letter state code (null if unknown)"
}"""
