import logging
from datetime import datetime

from flask import Flask, jsonify

from config.settings import load_config
from config.tools import TOOLS, group_by_category
from api.history import favorites_manager, history_manager

from blueprints.colors import colors_bp
from blueprints.csv_viewer import csv_bp
from blueprints.encoding import encoding_bp
from blueprints.files import files_bp
from blueprints.history import history_bp
from blueprints.json_tools import json_bp
from blueprints.jwt_decoder import jwt_bp
from blueprints.qr_code import qr_bp
from blueprints.sql_formatter import sql_bp
from blueprints.svg_to_react import svg_bp
from blueprints.url_tools import url_bp

logger = logging.getLogger(__name__)

app = Flask(__name__)

app.register_blueprint(json_bp)
app.register_blueprint(csv_bp)
app.register_blueprint(url_bp)
app.register_blueprint(qr_bp)
app.register_blueprint(encoding_bp)
app.register_blueprint(files_bp)
app.register_blueprint(jwt_bp)
app.register_blueprint(sql_bp)
app.register_blueprint(svg_bp)
app.register_blueprint(colors_bp)
app.register_blueprint(history_bp)

CONFIG = load_config()
TOOL_CONFIG = CONFIG.get('tools', {})

def is_tool_enabled(tool_id):
    """Check if a tool is enabled in config. Defaults to True if not specified."""
    tool_conf = TOOL_CONFIG.get(tool_id, {})
    return tool_conf.get('enabled', True)

def get_enabled_tools(tools_list):
    """Filter tools list to only include enabled tools."""
    return [tool for tool in tools_list if is_tool_enabled(tool.get('id', ''))]

@app.route('/api/tools')
def api_tools():
    tools = [
        {**tool, 'favorite': favorites_manager.is_favorite(tool['id'])}
        for tool in get_enabled_tools(TOOLS)
    ]
    return jsonify({
        'tools': tools,
        'categories': group_by_category(tools),
        'favorites': [tool for tool in tools if tool['favorite']],
    })

@app.route('/health')
def health():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'tools_count': len(get_enabled_tools(TOOLS)),
        'history_stats': history_manager.get_all_history_stats()
    })

@app.errorhandler(404)
def not_found(error):
    return jsonify({'success': False, 'error': 'Not found'}), 404

@app.errorhandler(405)
def method_not_allowed(error):
    return jsonify({'success': False, 'error': 'Method not allowed'}), 405


if __name__ == '__main__':
    app.run(host='127.0.0.1', port=8000, debug=True)
