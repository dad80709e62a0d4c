"""Shareholder prompts: fed to the model backend.

The model is asked for the same shape the heuristic parser returns
(companyName + shareholders), plus a self-reported confidence and notes
that are surfaced as warnings.
"""

SHAREHOLDER_SYSTEM_PROMPT = (
    "You are a precise data extraction assistant. "
    "Extract information exactly as requested and return valid JSON."
)

SHAREHOLDER_USER_PROMPT = """Extract shareholder information from the following PDF text.

TASK:
1. Find the COMPANY NAME - extract ONLY the core name (e.g., "Lexsy Inc") WITHOUT legal jargon like "bylaws", "amended", "of Delaware", etc.
2. Look specifically for the "RESTRICTED STOCK PURCHASERS" section or similar shareholder table
3. Extract ONLY the names and share counts from that section
4. Return the data in the exact JSON format specified below

TEXT:
{document_text}

REQUIRED OUTPUT FORMAT (valid JSON only):
{{
  "companyName": "Clean Company Name Only (e.g., 'Lexsy Inc')" or null,
  "shareholders": [
    {{"name": "Full Name", "shares": 1000}},
    {{"name": "Another Name", "shares": 500}}
  ],
  "confidence": "high" or "medium" or "low",
  "notes": "Any extraction concerns"
}}

RULES:
- Return ONLY valid JSON, no other text
- Company name must be clean: NO bylaws, NO state names, NO legal jargon
- Focus on "Restricted Stock Purchasers" section
- Include only names with share counts from that section
- shares must be a positive integer
- If no shareholders found, return empty array

JSON Response:"""


def build_shareholder_prompt(document_text: str) -> str:
    """Fill the user prompt with (possibly truncated) document text."""
    return SHAREHOLDER_USER_PROMPT.format(document_text=document_text)
