"""Block page shown in place of a refused top-level navigation."""

import html

# Base URL for the substituted page. It has no host, so the navigation gate
# lets the block page itself through.
BLOCK_PAGE_BASE_URL = "about:blank"

_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Access Restricted</title>
    <style>
        body {{
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Ubuntu, Cantarell, sans-serif;
            display: flex;
            justify-content: center;
            align-items: center;
            min-height: 100vh;
            margin: 0;
            background: #2d3748;
            color: #333;
        }}
        .container {{
            background: white;
            border-radius: 12px;
            padding: 40px;
            max-width: 500px;
            text-align: center;
        }}
        h1 {{ margin: 0 0 16px 0; color: #2d3748; font-size: 28px; }}
        p {{ margin: 0 0 24px 0; color: #718096; font-size: 16px; line-height: 1.6; }}
        .blocked-url {{
            background: #f7fafc;
            border: 1px solid #e2e8f0;
            border-radius: 6px;
            padding: 12px;
            margin: 20px 0;
            font-family: monospace;
            font-size: 14px;
            color: #c53030;
            word-break: break-all;
        }}
        .back-button {{
            background: #087BC4;
            color: white;
            border-radius: 6px;
            padding: 14px 32px;
            font-size: 16px;
            font-weight: 600;
            text-decoration: none;
            display: inline-block;
        }}
    </style>
</head>
<body>
    <div class="container">
        <h1>Access Restricted</h1>
        <p>This domain is not allowed in the current exam session.</p>
        <div class="blocked-url">{blocked_url}</div>
        <a href="{start_url}" class="back-button" id="backButton">Return to Exam</a>
    </div>
</body>
</html>
"""


def escape_html(text: str) -> str:
    """Escape ``& < > " '`` for embedding in element content or attributes."""
    return html.escape(text, quote=True)


def render_block_page(blocked_url: str, start_url: str) -> str:
    """Render the block page for ``blocked_url`` with a link back to ``start_url``."""
    return _TEMPLATE.format(blocked_url=escape_html(blocked_url), start_url=escape_html(start_url))
