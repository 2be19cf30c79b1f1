"""Root landing page for Pixico with the header search widget and API links.

The widget is a thin client over WS /api/v1/search/ws: it forwards keystrokes
and pointer/key events and renders the state snapshots the server pushes.
"""

from html import escape


def render_root_page(app_name: str, tagline: str) -> str:
    """Return HTML for the root landing page."""
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(app_name)}</title>
    <style>
        * {{ box-sizing: border-box; }}
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #000;
            color: #e0e0e0;
        }}
        header {{
            display: flex;
            align-items: center;
            justify-content: space-between;
            padding: 1rem 1.5rem;
            border-bottom: 1px solid #1a1a1a;
        }}
        .logo {{ font-weight: 600; color: #fff; text-decoration: none; }}
        .search {{ position: relative; width: min(420px, 60vw); }}
        .search input {{
            width: 100%;
            padding: 0.6rem 0.9rem;
            border-radius: 8px;
            border: 1px solid #333;
            background: #111;
            color: #fff;
        }}
        .search .spinner {{ position: absolute; right: 0.75rem; top: 0.6rem; display: none; }}
        .search.fetching .spinner {{ display: block; }}
        .dropdown {{
            position: absolute;
            top: calc(100% + 4px);
            left: 0;
            right: 0;
            background: #111;
            border: 1px solid #333;
            border-radius: 8px;
            display: none;
            z-index: 10;
        }}
        .dropdown.open {{ display: block; }}
        .dropdown .group {{ padding: 0.4rem 0.9rem; font-size: 0.7rem; color: #777; letter-spacing: 0.08em; }}
        .dropdown button {{
            display: block;
            width: 100%;
            text-align: left;
            padding: 0.5rem 0.9rem;
            background: none;
            border: 0;
            color: #e0e0e0;
            cursor: pointer;
        }}
        .dropdown button:hover {{ background: #1c1c1c; }}
        main {{ max-width: 560px; margin: 4rem auto; padding: 0 1rem; text-align: center; }}
        h1 {{ font-size: clamp(2rem, 6vw, 2.75rem); margin: 0 0 0.5rem 0; color: #fff; }}
        .tagline {{ color: #999; }}
        .links a {{ color: #e0e0e0; margin: 0 0.5rem; }}
    </style>
</head>
<body>
    <header>
        <a class="logo" href="/">{escape(app_name)}</a>
        <form class="search" id="search" action="/search" method="get" autocomplete="off">
            <input type="search" name="q" id="search-input" placeholder="Search prompts or #code">
            <span class="spinner">&#8230;</span>
            <div class="dropdown" id="search-dropdown"></div>
        </form>
    </header>
    <main>
        <h1>{escape(app_name)}</h1>
        <p class="tagline">{escape(tagline)}</p>
        <p class="links">
            <a href="/search">Search</a>
            <a href="/docs">API docs</a>
            <a href="/api/v1/health">Health</a>
        </p>
    </main>
    <script>
    (function () {{
        const form = document.getElementById("search");
        const input = document.getElementById("search-input");
        const dropdown = document.getElementById("search-dropdown");
        const scheme = location.protocol === "https:" ? "wss" : "ws";
        const ws = new WebSocket(scheme + "://" + location.host + "/api/v1/search/ws");
        const send = (msg) => ws.readyState === WebSocket.OPEN && ws.send(JSON.stringify(msg));

        function render(state) {{
            form.classList.toggle("fetching", state.state === "fetching");
            dropdown.innerHTML = "";
            if (state.state !== "results" || !state.open) {{
                dropdown.classList.remove("open");
                return;
            }}
            let group = null;
            for (const hit of state.results) {{
                if (hit.kind !== group) {{
                    group = hit.kind;
                    const label = document.createElement("div");
                    label.className = "group";
                    label.textContent = group === "prompt" ? "PROMPTS" : "ARTICLES";
                    dropdown.appendChild(label);
                }}
                const item = document.createElement("button");
                item.type = "button";
                item.textContent = hit.title;
                item.addEventListener("click", () => send({{type: "select", kind: hit.kind, slug: hit.slug}}));
                dropdown.appendChild(item);
            }}
            dropdown.classList.add("open");
        }}

        ws.addEventListener("message", (event) => {{
            const msg = JSON.parse(event.data);
            if (msg.type === "state") {{
                render(msg);
            }} else if (msg.type === "navigate") {{
                if (!msg.path.startsWith("/search")) input.value = "";
                location.assign(msg.path);
            }}
        }});
        input.addEventListener("input", () => send({{type: "input", value: input.value}}));
        input.addEventListener("focus", () => send({{type: "focus"}}));
        document.addEventListener("keydown", (e) => send({{type: "keydown", key: e.key}}));
        document.addEventListener("pointerdown", (e) => send({{type: "pointerdown", inside: form.contains(e.target)}}));
        form.addEventListener("submit", (e) => {{
            if (ws.readyState !== WebSocket.OPEN) return;
            e.preventDefault();
            send({{type: "submit"}});
        }});
    }})();
    </script>
</body>
</html>
"""
