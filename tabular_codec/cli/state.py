from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from ..config import CodecConfig


@dataclass(frozen=True, slots=True)
class CliState:
    config: CodecConfig
    verbose: int = 0


def current_state() -> CliState:
    state = click.get_current_context().find_object(CliState)
    if state is None:
        raise click.UsageError("tabular-codec commands must run under the app group")
    return state
