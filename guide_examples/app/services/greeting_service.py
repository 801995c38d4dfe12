"""Service producing greeting messages."""

import logging


logger = logging.getLogger(__name__)


class GreetingService:
    """Formats greetings from a template containing a ``{name}`` placeholder."""

    def __init__(self, template: str) -> None:
        if "{name}" not in template:
            raise ValueError("Greeting template must contain a '{name}' placeholder")
        self.template = template

    def get_greeting(self, name: str) -> str:
        logger.debug("Greeting %s", name)
        return self.template.replace("{name}", name)
