from .chart import (
    plot_family_bar,
    plot_winner_bar,
)

__all__ = [
    "plot_family_bar",
    "plot_winner_bar",
]
