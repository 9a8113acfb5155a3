"""Trees the engine itself renders: the welcome card and the connection banner."""

from .models import UIComponentNode

OPEN_SETTINGS_ACTION = "open_settings"


def build_greeting() -> UIComponentNode:
    """Welcome card shown before the agent is configured."""
    return UIComponentNode.model_validate({
        "type": "container",
        "props": {"direction": "col", "gap": "md"},
        "children": [
            {
                "type": "card",
                "props": {"variant": "filled"},
                "children": [
                    {
                        "type": "container",
                        "props": {"direction": "row", "align": "center", "gap": "md"},
                        "children": [
                            {"type": "text", "props": {"content": "✨", "size": "xl"}},
                            {
                                "type": "text",
                                "props": {
                                    "content": "A2UI Interface Ready",
                                    "size": "lg",
                                    "bold": True,
                                    "color": "text-white",
                                },
                            },
                        ],
                    },
                    {"type": "divider"},
                    {
                        "type": "text",
                        "props": {
                            "content": "Please configure your Azure OpenAI settings to begin.",
                            "size": "md",
                        },
                    },
                    {
                        "type": "container",
                        "props": {"direction": "row", "gap": "sm"},
                        "children": [
                            {
                                "type": "button",
                                "props": {
                                    "label": "Configure Agent",
                                    "action": OPEN_SETTINGS_ACTION,
                                    "variant": "primary",
                                },
                            },
                            {
                                "type": "button",
                                "props": {
                                    "label": "ServiceNow Demo",
                                    "action": "demo_servicenow",
                                    "variant": "secondary",
                                },
                            },
                        ],
                    },
                ],
            }
        ],
    })


def build_connected_banner(deployment_name: str) -> UIComponentNode:
    """Acknowledgement appended after a successful connect."""
    return UIComponentNode.model_validate({
        "type": "container",
        "props": {"direction": "col", "gap": "sm"},
        "children": [
            {"type": "badge", "props": {"label": "Connected", "variant": "success"}},
            {"type": "text", "props": {"content": f"Successfully connected to {deployment_name}"}},
        ],
    })
