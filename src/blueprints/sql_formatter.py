import logging

from flask import Blueprint, request, jsonify
from api.sql_formatter import INDENTATIONS, LANGUAGES, error_output, format_sql

logger = logging.getLogger(__name__)

sql_bp = Blueprint('sql_formatter', __name__)


@sql_bp.route('/api/sql/format', methods=['POST'])
def api_sql_format():
    """Format SQL for the selected dialect and indentation"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        sql = data.get('data', '')
        if not isinstance(sql, str) or not sql.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        try:
            indent = int(data.get('indent', 2))
        except (TypeError, ValueError):
            return jsonify({'success': False, 'error': 'Indent must be a number'}), 400

        try:
            result = format_sql(sql, data.get('language', 'sql'), indent)
        except ValueError as e:
            return jsonify({'success': False, 'error': str(e), 'result': error_output(sql, e)}), 400

        return jsonify({'success': True, 'result': result})

    except Exception as e:
        logger.exception("SQL formatting failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@sql_bp.route('/api/sql/options')
def api_sql_options():
    return jsonify({'languages': LANGUAGES, 'indentations': INDENTATIONS})
