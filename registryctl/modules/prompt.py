import sys
from typing import Optional, TextIO

import typer

from ..utils import InputError
from .models import RegistryRequest

NAME_PROMPT = "Enter the name of the registry: "
DOMAIN_PROMPT = "Enter your domain name: "


def prompt_line(message: str, stream: Optional[TextIO] = None) -> str:
    """Print ``message`` and read a single line from ``stream`` (stdin by default).

    Any line, including an empty one, is accepted. End of input is fatal.
    """
    stream = stream or sys.stdin
    typer.echo(message)
    try:
        line = stream.readline()
    except (OSError, ValueError) as e:
        raise InputError(f"failed to read line: {e}", step="input") from e
    if line == "":
        raise InputError("failed to read line: end of input", step="input")
    return line


def collect_request(
    name: Optional[str] = None,
    domain: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> RegistryRequest:
    """Prompt for whichever of registry name and domain were not supplied."""
    if name is None:
        name = prompt_line(NAME_PROMPT, stream)
    if domain is None:
        domain = prompt_line(DOMAIN_PROMPT, stream)
    return RegistryRequest.from_input(name, domain)
