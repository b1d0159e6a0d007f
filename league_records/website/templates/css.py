"""
CSS styles for the league record book website.
"""


def get_css() -> str:
    """Return the CSS styles for the website."""
    return """        :root {
            --bg-primary: #f2f4f1;
            --bg-secondary: #ffffff;
            --bg-header: linear-gradient(135deg, #1b4332, #2d6a4f);
            --text-primary: #222222;
            --text-secondary: #5c5c5c;
            --text-header: #ffffff;
            --border-color: #dcdfdb;
            --accent-color: #2d6a4f;
            --accent-light: #e3f1ea;
            --hover-color: #f6f8f5;
            --shadow: 0 3px 6px rgba(0,0,0,0.08);
            --danger: #c0392b;
        }

        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Ubuntu, sans-serif;
            background: var(--bg-primary);
            color: var(--text-primary);
            line-height: 1.5;
        }
        .header {
            background: var(--bg-header);
            color: var(--text-header);
            padding: 1.75rem 2rem;
            text-align: center;
            position: relative;
        }
        .header h1 {
            font-size: 1.9rem;
            margin-bottom: 0.25rem;
        }
        .header-subtitle {
            opacity: 0.85;
        }
        .generated-time {
            position: absolute;
            bottom: 0.5rem;
            right: 1rem;
            font-size: 0.75rem;
            opacity: 0.7;
        }
        .container {
            max-width: 1100px;
            margin: 0 auto;
            padding: 2rem;
        }
        .tabs {
            display: flex;
            gap: 0.5rem;
            margin-bottom: 1rem;
        }
        .tab {
            padding: 0.7rem 1.4rem;
            background: var(--bg-secondary);
            border: none;
            border-radius: 8px;
            cursor: pointer;
            font-size: 1rem;
            color: var(--text-primary);
            box-shadow: var(--shadow);
        }
        .tab:hover {
            background: var(--hover-color);
        }
        .tab.active {
            background: var(--accent-color);
            color: white;
        }
        .section {
            background: var(--bg-secondary);
            border-radius: 12px;
            padding: 1.5rem;
            box-shadow: var(--shadow);
        }
        .section[hidden] {
            display: none;
        }
        .section h2 {
            margin-bottom: 1rem;
            color: var(--accent-color);
            border-bottom: 2px solid var(--accent-color);
            padding-bottom: 0.5rem;
        }
        table {
            width: 100%;
            border-collapse: collapse;
        }
        th, td {
            padding: 0.65rem 0.75rem;
            text-align: left;
            border-bottom: 1px solid var(--border-color);
        }
        th {
            background: var(--bg-primary);
            font-weight: 600;
            cursor: pointer;
            user-select: none;
            white-space: nowrap;
        }
        th:hover {
            background: var(--hover-color);
        }
        th.sorted-asc::after {
            content: ' \\25B2';
            font-size: 0.7rem;
        }
        th.sorted-desc::after {
            content: ' \\25BC';
            font-size: 0.7rem;
        }
        tbody tr:hover {
            background: var(--hover-color);
        }
        .records-grid {
            display: grid;
            grid-template-columns: repeat(auto-fill, minmax(300px, 1fr));
            gap: 1rem;
        }
        .record-card {
            border: 1px solid var(--border-color);
            border-radius: 10px;
            padding: 1rem 1.25rem;
            background: var(--bg-secondary);
        }
        .record-card h3 {
            font-size: 1rem;
            color: var(--accent-color);
            margin-bottom: 0.5rem;
            text-transform: uppercase;
            letter-spacing: 0.03em;
        }
        .record-card .content div {
            padding: 0.1rem 0;
        }
        .record-card .card-error {
            color: var(--danger);
            font-size: 0.85rem;
        }
        .records-unavailable {
            color: var(--danger);
            margin-bottom: 1rem;
        }

        @media (max-width: 640px) {
            .container {
                padding: 1rem;
            }
            th, td {
                padding: 0.5rem;
                font-size: 0.85rem;
            }
        }"""
