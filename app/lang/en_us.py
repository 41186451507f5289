"""English (US) strings."""

MODULE_STRINGS = {
    "word_visualizations": "Visualizations",
    "phrase_manage_visualizations": "Manage Visualizations",
    "phrase_edit_visualization": "Edit Visualization",
    "phrase_prev_arrow": "&laquo; prev",
    "phrase_next_arrow": "next &raquo;",
    "phrase_back_to_vis_list": "back to visualization list",
    "phrase_last_cached_c": "Last cached:",
    "phrase_not_cached": "Not cached",
}

CORE_STRINGS = {
    "word_close": "Close",
}
