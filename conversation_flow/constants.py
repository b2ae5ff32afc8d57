"""
Conversation Flow Constants

Delimiters, role labels, step type names and keyword rules shared by the
parsing steps.
"""

# Step delimiter in the conversation flow script
STEP_DELIMITER = "→"

# Message roles
ROLE_CUSTOMER = "customer"
ROLE_AGENT = "agent"

# Turn labels (matched case-insensitively against the trimmed line)
ROLE_LABELS = {
    "customer:": ROLE_CUSTOMER,
    "agent:": ROLE_AGENT,
}

# Positional step types
FIRST_STEP_TYPE = "Customer Inquiry"
LAST_STEP_TYPE = "Completion"
DEFAULT_STEP_TYPE = "Conversation Step"

# Step types allowed to have zero messages and still appear in the output
STRUCTURAL_TYPES = frozenset(
    {
        "Entry Point",
        "Exit Point",
        "Integration",
        "Decision Point",
    }
)

# Step types left untouched by content-based re-classification.
# Not the same set as STRUCTURAL_TYPES: "Escalation Point" is only preserved,
# it does not keep an empty step alive.
PRESERVED_TYPES = frozenset(
    {
        "Entry Point",
        "Exit Point",
        "Integration",
        "Decision Point",
        "Escalation Point",
    }
)

# Content rules, checked in order against the lower-cased step text
CONTENT_RULES = [
    {"step_type": "Price Inquiry", "keywords": ["price", "cost", "$"]},
    {"step_type": "Purchase Decision", "keywords": ["buy", "purchase"]},
    {
        "step_type": "Requirement Gathering",
        "keywords": ["need", "want", "recommend", "suggest"],
    },
]
