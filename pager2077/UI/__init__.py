from .pager_display import PagerDisplay, render_lines

__all__ = [
    'PagerDisplay',
    'render_lines',
]
