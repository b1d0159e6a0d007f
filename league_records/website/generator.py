"""
Website generator for interactive HTML output.

Thin orchestrator that serializes the processed data and assembles the
page from the template components in templates/.
"""

import os
import json
from datetime import datetime
from typing import Dict, Any

from .serializers import DataSerializer
from .templates import get_css, get_javascript, get_head, get_body
from ..utils.log import info


def generate_website_from_data(processed_data: Dict[str, Any], output_path: str) -> Dict[str, Any]:
    """
    Generate interactive HTML website from processed data.

    Args:
        processed_data: Dictionary with the career DataFrame, sort state and cards
        output_path: Path to save the HTML file

    Returns:
        The serialized data embedded in the page
    """
    info(f"Generating website: {output_path}")

    serializer = DataSerializer(processed_data)
    data = serializer.serialize_all()
    json_data = json.dumps(data, default=str)

    html_content = _generate_html(json_data, data.get('summary', {}))

    output_dir = os.path.dirname(output_path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)

    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(html_content)

    info(f"Website saved: {output_path}")
    return data


def _generate_html(json_data: str, summary: Dict[str, Any]) -> str:
    """
    Generate the HTML content by assembling template components.

    Args:
        json_data: JSON string with serialized career rows and cards
        summary: Dictionary with totalPlayers

    Returns:
        Complete HTML document as a string
    """
    total_players = summary.get('totalPlayers', 0)
    generated_time = datetime.now().strftime('%Y-%m-%d %H:%M:%S')

    css = get_css()
    # Keep "</script>" inside data from closing the script element
    js = get_javascript(json_data.replace('</', '<\\/'))
    head = get_head(css)
    body = get_body(total_players, generated_time)

    html = f'''<!DOCTYPE html>
<html lang="en">
{head}
{body}

    <script>
{js}
    </script>
</body>
</html>'''

    return html
