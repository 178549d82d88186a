"""Talks advertised on the site, in display order."""
from typing import Tuple

from src.models.talk import Talk
from src.utils.validation import validate_registry

_HELLO_WORLD_DESCRIPTION = (
    'This is a simple hello world program. It prints "Hello, World!" to the console.\n'
    "    It is a simple program that demonstrates the basic syntax of a programming language."
)

TALK_DATA: Tuple[Talk, ...] = (
    Talk(
        title="Hello World Project",
        description=_HELLO_WORLD_DESCRIPTION,
        img_src="/static/images/google.png",
        href="https://www.google.com",
    ),
    Talk(
        title="Hello World Project 2",
        description=_HELLO_WORLD_DESCRIPTION,
        img_src="/static/images/time-machine.jpg",
        href="/blog/the-time-machine",
    ),
)

validate_registry(TALK_DATA)
