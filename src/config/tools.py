# Store for tools configuration

TOOLS = [
    {
        "id": "json-formatter",
        "name": "JSON Formatter",
        "description": "Format and beautify JSON with customizable options",
        "path": "/api/json/format",
        "category": "JSON TOOLS",
        "tags": ["formatter", "json", "minify"],
        "has_history": True,
        "icon": "📄"
    },
    {
        "id": "json-to-xml",
        "name": "JSON to XML",
        "description": "Convert JSON to XML format",
        "path": "/api/json/to-xml",
        "category": "JSON TOOLS",
        "tags": ["json", "xml", "converter"],
        "has_history": True,
        "icon": "🔄"
    },
    {
        "id": "json-to-env",
        "name": "JSON to ENV",
        "description": "Convert JSON to environment variables, Docker Compose, Kubernetes or Azure settings",
        "path": "/api/json/to-env",
        "category": "JSON TOOLS",
        "tags": ["json", "env", "docker", "kubernetes", "yaml"],
        "has_history": True,
        "icon": "🐳"
    },
    {
        "id": "json-query",
        "name": "JSON Query Explorer",
        "description": "Query and explore complex JSON structures with JSONPath",
        "path": "/api/json/query",
        "category": "JSON TOOLS",
        "tags": ["json", "query", "jsonpath"],
        "has_history": True,
        "icon": "🔍"
    },
    {
        "id": "csv-viewer",
        "name": "CSV Viewer",
        "description": "View and explore CSV files in tabular format",
        "path": "/api/csv/parse",
        "category": "CSV TOOLS",
        "tags": ["csv", "table", "viewer"],
        "has_history": True,
        "icon": "📊"
    },
    {
        "id": "url-encoder",
        "name": "URL Encoder",
        "description": "Encode and decode URLs and break them into components",
        "path": "/api/url/encode",
        "category": "URL TOOLS",
        "tags": ["url", "encode", "decode", "percent"],
        "has_history": True,
        "icon": "🔗"
    },
    {
        "id": "url-to-qr",
        "name": "URL to QR Code",
        "description": "Generate QR codes from URLs",
        "path": "/api/qr",
        "category": "URL TOOLS",
        "tags": ["qr", "url", "image"],
        "has_history": True,
        "icon": "▦"
    },
    {
        "id": "base64",
        "name": "Base64 Encoder/Decoder",
        "description": "Encode and decode Base64 strings",
        "path": "/api/base64/encode",
        "category": "BASE64 TOOLS",
        "tags": ["base64", "encode", "decode"],
        "has_history": True,
        "icon": "🔤"
    },
    {
        "id": "base64-to-file",
        "name": "Base64 to File",
        "description": "Convert Base64 strings to downloadable files",
        "path": "/api/base64/to-file",
        "category": "BASE64 TOOLS",
        "tags": ["base64", "file", "download", "mime"],
        "has_history": False,
        "icon": "📁"
    },
    {
        "id": "base64-to-hex",
        "name": "Base64 to HEX",
        "description": "Convert Base64 strings to hexadecimal",
        "path": "/api/base64/to-hex",
        "category": "BASE64 TOOLS",
        "tags": ["base64", "hex", "converter"],
        "has_history": True,
        "icon": "🔢"
    },
    {
        "id": "hex",
        "name": "HEX Encoder/Decoder",
        "description": "Encode text to hexadecimal and decode it back",
        "path": "/api/hex/encode",
        "category": "HEX TOOLS",
        "tags": ["hex", "encode", "decode"],
        "has_history": True,
        "icon": "🔣"
    },
    {
        "id": "hex-to-base64",
        "name": "HEX to Base64",
        "description": "Convert hexadecimal to standard, URL-safe or wrapped Base64",
        "path": "/api/hex/to-base64",
        "category": "HEX TOOLS",
        "tags": ["hex", "base64", "converter"],
        "has_history": True,
        "icon": "🔁"
    },
    {
        "id": "hex-to-file",
        "name": "HEX to File",
        "description": "Convert hexadecimal dumps to downloadable files with type detection",
        "path": "/api/hex/to-file",
        "category": "HEX TOOLS",
        "tags": ["hex", "file", "download", "mime"],
        "has_history": False,
        "icon": "💾"
    },
    {
        "id": "jwt-decoder",
        "name": "JWT Decoder",
        "description": "Decode JSON Web Tokens and verify HMAC signatures",
        "path": "/api/jwt/decode",
        "category": "SECURITY TOOLS",
        "tags": ["jwt", "decoder", "token", "security", "json", "auth"],
        "has_history": True,
        "icon": "🔑"
    },
    {
        "id": "sql-formatter",
        "name": "SQL Formatter",
        "description": "Format SQL queries for several dialects",
        "path": "/api/sql/format",
        "category": "SQL TOOLS",
        "tags": ["sql", "formatter", "database"],
        "has_history": True,
        "icon": "🗃️"
    },
    {
        "id": "svg-to-react-component",
        "name": "SVG to React Component",
        "description": "Convert SVG files to React components",
        "path": "/api/svg/to-react",
        "category": "REACT TOOLS",
        "tags": ["svg", "react", "jsx", "tsx", "component"],
        "has_history": True,
        "icon": "⚛️"
    },
    {
        "id": "color-converter",
        "name": "Color Converter",
        "description": "Convert between color formats (HEX, RGB, HSL, HSV, HWB, CMYK, LCH, LAB)",
        "path": "/api/color/convert",
        "category": "MISC TOOLS",
        "tags": ["color", "rgb", "hsl", "cmyk", "lab"],
        "has_history": True,
        "icon": "🎨"
    },
]


def get_tool(tool_id):
    """Look up a tool definition by id."""
    return next((tool for tool in TOOLS if tool["id"] == tool_id), None)


def group_by_category(tools):
    """Group tools into [{'name': category, 'tools': [...]}] in catalogue order."""
    categories = []
    for tool in tools:
        category = next((c for c in categories if c["name"] == tool["category"]), None)
        if category is None:
            category = {"name": tool["category"], "tools": []}
            categories.append(category)
        category["tools"].append(tool)
    return categories
