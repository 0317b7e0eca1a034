"""Time label domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TimeLabel:
    """Text next to the slider.

    When no filter is selected the text is empty and the "(any time)"
    placeholder is shown instead.
    """

    text: str = ""
    show_any_time: bool = True
