import logging

from flask import Blueprint, request, jsonify
from api.csv_viewer import DELIMITERS, QUOTE_CHARS, CsvTable, export_csv, parse_csv

logger = logging.getLogger(__name__)

csv_bp = Blueprint('csv_viewer', __name__)


@csv_bp.route('/api/csv/parse', methods=['POST'])
def api_csv_parse():
    """Parse CSV text into columns and rows"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        input_data = data.get('data', '')
        if not isinstance(input_data, str) or not input_data.strip():
            return jsonify({'success': False, 'error': 'No input data provided'}), 400

        table = parse_csv(
            input_data,
            delimiter=data.get('delimiter', ','),
            quote_char=data.get('quote_char', '"'),
            has_header=bool(data.get('has_header', True)),
        )
        return jsonify({'success': True, **table.to_dict()})

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("CSV parsing failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@csv_bp.route('/api/csv/export', methods=['POST'])
def api_csv_export():
    """Serialize columns and rows back to CSV text"""
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        columns = data.get('columns') or []
        rows = data.get('rows') or []
        if not isinstance(columns, list) or not isinstance(rows, list):
            return jsonify({'success': False, 'error': 'Columns and rows must be lists'}), 400

        result = export_csv(
            CsvTable(columns=columns, rows=rows),
            delimiter=data.get('delimiter', ','),
            quote_char=data.get('quote_char', '"'),
            include_header=bool(data.get('has_header', True)),
        )
        return jsonify({'success': True, 'result': result})

    except ValueError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        logger.exception("CSV export failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@csv_bp.route('/api/csv/options')
def api_csv_options():
    return jsonify({'delimiters': DELIMITERS, 'quote_chars': QUOTE_CHARS})
