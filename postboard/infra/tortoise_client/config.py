"""
Tortoise ORM configuration
"""
from typing import Any, Dict

MODEL_MODULES = ["postboard.infra.tortoise_client.models"]


def build_tortoise_config(database_url: str) -> Dict[str, Any]:
    return {
        "connections": {
            "default": database_url
        },
        "apps": {
            "models": {
                "models": MODEL_MODULES,
                "default_connection": "default",
            },
        },
    }
