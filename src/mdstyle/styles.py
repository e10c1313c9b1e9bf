"""Built-in stylesheets.

``BASE_CSS`` is always placed in front of the theme so list markers, code
blocks and tables survive restrictive editors. ``DEFAULT_THEME_CSS`` is used
whenever no stored theme applies.
"""

CONTAINER_CLASS = "md-container"

BASE_CSS = """
/* Lists: keep markers visible */
ul {
  list-style-type: disc !important;
  padding-left: 2em !important;
  margin: 1em 0;
}

ol {
  list-style-type: decimal !important;
  padding-left: 2em !important;
  margin: 1em 0;
}

li {
  display: list-item !important;
  margin: 0.3em 0;
}

.md-container {
  line-height: 1.8;
  color: #333;
  word-wrap: break-word;
  overflow-wrap: break-word;
}

pre {
  overflow-x: auto;
  background: #f6f8fa;
  border-radius: 6px;
  margin: 1em 0;
}

pre code {
  display: block;
  padding: 1em;
  white-space: pre-wrap;
  word-break: break-all;
}

table {
  border-collapse: collapse;
  width: 100%;
  margin: 1em 0;
}

th, td {
  border: 1px solid #ddd;
  padding: 8px;
}

th {
  background: rgba(0, 0, 0, 0.05);
}

img {
  max-width: 100%;
  height: auto;
}

a {
  color: #576b95;
  text-decoration: none;
}

blockquote {
  margin: 1em 0;
  padding: 1em;
  border-left: 4px solid #ddd;
  background: rgba(0, 0, 0, 0.03);
}

hr {
  border: none;
  border-top: 1px solid rgba(0, 0, 0, 0.1);
  margin: 1.5em 0;
}
"""

DEFAULT_THEME_CSS = """
:root {
  --md-primary-color: #0F4C81;
  --md-font-family: -apple-system-font, BlinkMacSystemFont, Helvetica Neue, PingFang SC, Hiragino Sans GB, Microsoft YaHei UI, Microsoft YaHei, Arial, sans-serif;
  --md-font-size: 16px;
}

.md-container { font-family: var(--md-font-family); font-size: var(--md-font-size); line-height: 1.8; color: #333; }
h1, h2, h3, h4, h5, h6 { font-weight: bold; color: inherit; margin: 1.5em 0 0.5em; }
h1 { font-size: 1.6em; border-bottom: 2px solid var(--md-primary-color); display: table; margin: 2em auto 1em; padding: 0 1em; }
h2 { font-size: 1.4em; background: var(--md-primary-color); color: #fff; display: table; margin: 2em auto 1em; padding: 0.2em 0.5em; }
h3 { font-size: 1.2em; border-left: 3px solid var(--md-primary-color); padding-left: 8px; }
p { margin: 1em 0; }
blockquote { border-left: 4px solid var(--md-primary-color); padding: 1em; margin: 1em 0; background: rgba(0,0,0,0.03); }
blockquote p { margin: 0; }
code { background: rgba(27,31,35,0.05); padding: 2px 5px; border-radius: 3px; font-size: 90%; color: #d14; }
pre { background: #f6f8fa; padding: 1em; border-radius: 6px; overflow-x: auto; line-height: 1.5; }
pre code { background: none; padding: 0; color: inherit; }
a { color: #576b95; text-decoration: none; }
strong { color: var(--md-primary-color); font-weight: bold; }
ul, ol { padding-left: 1.5em; margin: 1em 0; }
li { margin: 0.3em 0; }
table { border-collapse: collapse; width: 100%; margin: 1em 0; }
th, td { border: 1px solid #ddd; padding: 8px; }
th { background: #f6f8fa; font-weight: bold; }
img { max-width: 100%; display: block; margin: 1em auto; border-radius: 4px; }
hr { border: none; border-top: 2px solid #eee; margin: 2em 0; }
"""
