APP_ORG = "MdView"
APP_NAME = "MdView"

MARKDOWN_EXT = ".md"

# CSS classes emitted by the renderer
CLS_CODE_BLOCK = "code pretty"
CLS_IMAGE = "center"
CLS_NUMBER = "cyan-text"
CLS_BASH_COMMENT = "bash-comment"
CLS_INI_COMMENT = "ini-comment"
CLS_INI_SECTION = "ini-section"
CLS_INI_KEY = "ini-key"

LINE_BREAK = "<br>"

CSS_PREVIEW = """
body { font-family: -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; margin: 1.25rem; line-height: 1.55; }
h1,h2,h3,h4,h5 { margin-top: 1.2em; }
code { background:#f4f6f8; padding:.15rem .3rem; border-radius:6px; }
.code.pretty { background:#1a1d24; color:#e7e9ee; padding:.25rem .75rem; font-family: monospace; }
.code.pretty p { margin: 0; white-space: pre; }
img.center { display:block; margin: 0 auto; max-width: 100%; }
.cyan-text { color:#0097a7; }
.bash-comment, .ini-comment { color:#4caf50; font-style: italic; }
.ini-section { color:#ffb74d; }
.ini-key { color:#7aa2ff; }
.json-key { color:#7aa2ff; }
.json-string { color:#a5d6a7; }
.json-number { color:#4dd0e1; }
.json-boolean { color:#ffb74d; }
.json-null { color:#ef9a9a; }
ul,ol { padding-left:1.5rem; }
"""

HTML_TEMPLATE = """<!doctype html>
<html>
<head>
<meta charset="utf-8" />
<style>{css}</style>
</head>
<body>
{body}
</body>
</html>
"""

CONFIG_SECTION_VIEWER = "viewer"
CONFIG_SECTION_LOGGING = "logging"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
