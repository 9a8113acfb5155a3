"""Fixed prompt text used when an action carries no form data."""

from ..components import OPEN_SETTINGS_ACTION

ACTION_PROMPT_TEMPLATE = "User triggered action: {action_id}."
ACTION_DISPLAY_TEMPLATE = "Triggered Action: {action_id}"

SUBMITTED_DATA_HEADER = "Submitted Form Data:"
SUBMITTED_DATA_MARKER = " (Submitted Data)"
INVALID_FIELDS_WARNING = "Warning: The following fields have validation errors: {fields}"
INVALID_FIELDS_MARKER = " ⚠️ Invalid Fields"

# action id -> (prompt, display)
DEMO_PROMPTS: dict[str, tuple[str, str]] = {
    "demo_product": (
        "Generate a stylish product card for high-end headphones with an image, price, and buy button.",
        "Show me a product demo",
    ),
    "demo_list": (
        "Create a checklist of 5 things to do for a healthy morning routine.",
        "Show me a list demo",
    ),
    "demo_servicenow": (
        "Generate a Standard ServiceNow Change Request form in a SINGLE card. "
        "Include at least these 10 fields: Change Number (readonly), Requested By, State, "
        "Priority, Risk, Short Description, Description, Assignment Group, Planned Start Date, "
        "and Planned End Date. Use Dividers to separate sections like \"General\", \"Schedule\", "
        "and \"Planning\".",
        "Create a Standard ServiceNow Change Request",
    ),
}

__all__ = [
    "ACTION_DISPLAY_TEMPLATE",
    "ACTION_PROMPT_TEMPLATE",
    "DEMO_PROMPTS",
    "INVALID_FIELDS_MARKER",
    "INVALID_FIELDS_WARNING",
    "OPEN_SETTINGS_ACTION",
    "SUBMITTED_DATA_HEADER",
    "SUBMITTED_DATA_MARKER",
]
