from markupsafe import Markup


def render_body(code: str | None) -> Markup:
    """Hand the compiled article body to the template layer untouched."""
    return Markup(code or "")
