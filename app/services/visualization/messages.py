"""Localized messages for the quicklinks dialog."""

from app.services.visualization.script import js_literal

# (key, taken from core table)
VIS_MESSAGE_KEYS = [
    ("word_visualizations", False),
    ("word_close", True),
    ("phrase_manage_visualizations", False),
    ("phrase_edit_visualization", False),
    ("phrase_prev_arrow", False),
    ("phrase_next_arrow", False),
    ("phrase_back_to_vis_list", False),
    ("phrase_last_cached_c", False),
    ("phrase_not_cached", False),
]


def get_vis_messages(module_strings: dict[str, str], core_strings: dict[str, str]) -> str:
    """Build the `g.vis_messages` block.

    Assumes output inside a <script> block where `g` is already defined.
    String table values are display text and may carry HTML entities, so they
    are quoted but not escaped.
    """
    rows = ["g.vis_messages = {};"]
    for key, from_core in VIS_MESSAGE_KEYS:
        text = core_strings[key] if from_core else module_strings[key]
        rows.append(f"g.vis_messages.{key} = {js_literal(text)};")
    return "\n".join(rows)
