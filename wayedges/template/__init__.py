"""Text templates with ``{name:argument}`` placeholders and the built-in float and preset kinds."""