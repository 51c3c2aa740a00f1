import asyncio
from datetime import UTC, datetime, timedelta

from reqkit.domain import (
    convert_to_codemirror_json,
    generate_id,
    get_content_type,
    humanize_date,
    normalize_file_name,
    relative_date,
    safe_parse_json,
    safe_parse_xml,
    safe_stringify_json,
    simple_hash,
    wait_for_next_tick,
)

request_id = generate_id()
body_hash = simple_hash('{"query": "ping"}')

# JSON bodies: parse, pretty-print, editor fragment
parsed = safe_parse_json('{"user": {"id": 1, "roles": ["admin"]}}')
pretty = safe_stringify_json(parsed, indent=True)
fragment = convert_to_codemirror_json(parsed)
raw = safe_parse_json("<not json>")  # returned unchanged

# XML bodies
xml = safe_parse_xml("<feed><entry id='1'/></feed>")

# Response sniffing
kind = get_content_type([("Content-Type", "application/atom+xml; charset=utf-8")])  # application/xml

# Display helpers
export_name = normalize_file_name("Users: list (v2)")
now = datetime.now(UTC)
relative_date(now - timedelta(seconds=90))  # 1 minute ago
relative_date(now - timedelta(days=45))  # 1 month ago
humanize_date("2024-01-05")  # January 5, 2024

asyncio.run(wait_for_next_tick())
