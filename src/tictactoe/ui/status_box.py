"""Bordered panel listing the most recent actions."""

from __future__ import annotations

from typing import Iterable, List


class StatusBox:
    """Render a fixed-height bordered panel, newest lines last."""

    def __init__(self, height: int = 4, min_width: int = 24) -> None:
        if height < 1:
            raise ValueError("status box height must be positive")
        self.height = height
        self.min_width = min_width

    def render(self, lines: Iterable[str], width: int) -> List[str]:
        inner_width = max(self.min_width, width)
        body = self._prepare_lines(lines, inner_width)
        top = "┌" + "─" * inner_width + "┐"
        bottom = "└" + "─" * inner_width + "┘"
        return [top, *(f"│{line}│" for line in body), bottom]

    def _prepare_lines(self, lines: Iterable[str], inner_width: int) -> List[str]:
        collected = [str(line or "") for line in lines][-self.height :]
        while len(collected) < self.height:
            collected.insert(0, "")
        return [line[:inner_width].ljust(inner_width) for line in collected]
