from gridsearch.frontend.cli.render import render_table, render_text

__all__ = ["render_table", "render_text"]
