import logging

from flask import Blueprint, request, jsonify
from api.history import favorites_manager, history_manager, sanitize_data, validate_tool_name

logger = logging.getLogger(__name__)

history_bp = Blueprint('history', __name__)

# History API Routes
@history_bp.route('/api/history/<tool_name>', methods=['POST'])
def add_history(tool_name):
    if not validate_tool_name(tool_name):
        return jsonify({'error': 'Invalid tool name'}), 400

    try:
        data = request.get_json(silent=True)
        if not data or 'data' not in data:
            return jsonify({'error': 'Missing data field'}), 400

        input_data = sanitize_data(data['data'])
        operation = data.get('operation', 'process')
        metadata = data.get('metadata')
        if metadata is not None and not isinstance(metadata, dict):
            return jsonify({'error': 'Metadata must be an object'}), 400

        result = history_manager.add_history_entry(tool_name, input_data, operation, metadata)
        return jsonify(result)

    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except Exception:
        logger.exception("Adding history for %s failed", tool_name)
        return jsonify({'error': 'Internal server error'}), 500

@history_bp.route('/api/history/<tool_name>', methods=['GET'])
def get_history(tool_name):
    if not validate_tool_name(tool_name):
        return jsonify({'error': 'Invalid tool name'}), 400

    limit = request.args.get('limit', type=int)
    history = history_manager.get_history(tool_name, limit)

    return jsonify({
        'tool': tool_name,
        'history': history,
        'count': len(history)
    })

@history_bp.route('/api/history/<tool_name>/<entry_id>', methods=['GET'])
def get_history_entry(tool_name, entry_id):
    if not validate_tool_name(tool_name):
        return jsonify({'error': 'Invalid tool name'}), 400

    entry = history_manager.get_history_entry(tool_name, entry_id)
    if not entry:
        return jsonify({'error': 'History entry not found'}), 404

    return jsonify(entry)

@history_bp.route('/api/history/<tool_name>/<entry_id>', methods=['DELETE'])
def delete_history_entry(tool_name, entry_id):
    if not validate_tool_name(tool_name):
        return jsonify({'error': 'Invalid tool name'}), 400

    if history_manager.delete_history_entry(tool_name, entry_id):
        return jsonify({'success': True, 'message': 'History entry deleted'})
    return jsonify({'error': 'History entry not found'}), 404

@history_bp.route('/api/history/<tool_name>', methods=['DELETE'])
def clear_history(tool_name):
    if not validate_tool_name(tool_name):
        return jsonify({'error': 'Invalid tool name'}), 400

    return jsonify(history_manager.clear_history(tool_name))

@history_bp.route('/api/history/stats')
def history_stats():
    return jsonify(history_manager.get_all_history_stats())

@history_bp.route('/api/global-history', methods=['GET'])
def get_global_history():
    """Get global history across all tools"""
    limit = request.args.get('limit', type=int)
    history = history_manager.get_global_history(limit)

    return jsonify({
        'success': True,
        'history': history,
        'count': len(history)
    })

# Favorites API Routes
@history_bp.route('/api/favorites', methods=['GET'])
def get_favorites():
    return jsonify({'favorites': favorites_manager.get_favorites()})

@history_bp.route('/api/favorites/<tool_name>', methods=['POST'])
def toggle_favorite(tool_name):
    """Toggle the favorite flag for a tool"""
    if not validate_tool_name(tool_name):
        return jsonify({'error': 'Invalid tool name'}), 400

    favorite = favorites_manager.toggle(tool_name)
    return jsonify({'success': True, 'tool': tool_name, 'favorite': favorite})

@history_bp.route('/api/favorites', methods=['DELETE'])
def clear_favorites():
    favorites_manager.clear()
    return jsonify({'success': True, 'message': 'Favorites cleared'})
