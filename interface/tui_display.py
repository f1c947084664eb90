"""Display-width helpers (wide/narrow characters) for the TUI."""

from wcwidth import wcwidth

ELLIPSIS = "…"


def _char_width(ch: str) -> int:
    w = wcwidth(ch)
    return w if w and w > 0 else 0


class DisplayMixin:
    """Text width, trimming and wrapping that respect terminal cell widths."""

    @staticmethod
    def _display_width(text: str) -> int:
        return sum(_char_width(ch) for ch in text)

    @staticmethod
    def _trim_display(text: str, width: int) -> str:
        """Cut ``text`` to ``width`` cells, marking the cut with an ellipsis."""
        if width <= 0:
            return ""
        if DisplayMixin._display_width(text) <= width:
            return text
        acc = []
        used = 0
        for ch in text:
            w = _char_width(ch)
            if used + w > width - 1:
                break
            acc.append(ch)
            used += w
        return "".join(acc) + ELLIPSIS

    @staticmethod
    def _pad_display(text: str, width: int) -> str:
        trimmed = DisplayMixin._trim_display(text, width)
        return trimmed + " " * max(0, width - DisplayMixin._display_width(trimmed))


__all__ = ["DisplayMixin", "ELLIPSIS"]
