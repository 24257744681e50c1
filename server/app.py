"""
JsDoc Server - resolve documentation symbols over a JSON API
"""

from flask import Flask, request, jsonify

from jsdoc_core import logger
from jsdoc_core.logger import DocLogger
from jsdoc_core.options import DocOptions, FILTER_OPTION_DESCRIPTIONS
from jsdoc_core.parsers import TokenizeError
from jsdoc_core.publishers import PublisherFactory
from jsdoc_core.resolver import SymbolResolver


def create_app() -> Flask:
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024  # 16MB max upload

    @app.route('/api/resolve', methods=['POST'])
    def resolve():
        """Resolve the posted sources: {"files": {path: source}, "options": {...}}"""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': "Request body must be a JSON object"}), 400
        sources = data.get('files')
        if not isinstance(sources, dict) or not sources:
            return jsonify({'error': "'files' must map paths to source text"}), 400
        if not all(isinstance(text, str) for text in sources.values()):
            return jsonify({'error': "'files' must map paths to source text"}), 400

        raw_options = data.get('options', {})
        if not isinstance(raw_options, dict):
            return jsonify({'error': "'options' must be an object"}), 400

        try:
            options = DocOptions.from_dict(raw_options)
        except (KeyError, TypeError) as e:
            return jsonify({'error': f"Invalid options: {e}"}), 400

        logger.info(f"Resolving {len(sources)} posted files")
        resolver = SymbolResolver(options, DocLogger(), read_text=lambda path: sources[path])
        try:
            files = resolver.resolve(list(sources.keys()))
        except TokenizeError as e:
            return jsonify({'error': str(e)}), 422

        return jsonify({'files': [f.to_dict() for f in files]})

    @app.route('/api/options')
    def get_options():
        """List the symbol filter options"""
        return jsonify([{'id': option.value, 'description': description}
                        for option, description in FILTER_OPTION_DESCRIPTIONS])

    @app.route('/api/available/templates')
    def get_available_templates():
        """Get list of available publishers"""
        return jsonify(PublisherFactory.get_available_publishers())

    return app
