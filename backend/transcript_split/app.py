"""
Transcript Split - Service Application
======================================
Main application entry point that configures Flask and registers blueprints.

This module:
- Creates the Flask application factory
- Registers the split API blueprint
- Defines core routes (/health)
- Installs JSON error handlers

Route Organization:
- /health               -> Health check
- /api/split            -> Split a transcript
- /api/split/modes      -> Available modes and defaults
"""

from flask import Flask, jsonify
from dotenv import load_dotenv
from flask_cors import CORS

from transcript_split import __version__
from transcript_split.routes.split_routes import split_bp
from transcript_split.config import get_config, apply_environment_overrides
from transcript_split.logging_config import get_split_logger

# Load environment variables
load_dotenv()

# Initialize configuration with environment overrides
config = get_config()
apply_environment_overrides(config)

# Configure logging
logger = get_split_logger("app", log_to_file=False)


def create_app(config_override=None):
    """
    Application factory function.

    Creates and configures the Flask application with:
    - CORS support
    - Blueprint registration
    - Request size limits

    Args:
        config_override: Optional AppConfig instance to use instead of global config

    Returns:
        Configured Flask application instance
    """
    app_config = config_override or get_config()

    app = Flask(__name__)
    CORS(app, origins=app_config.flask.cors_origins)

    # Store config in app for access in routes
    app.app_config = app_config

    # ==========================================================================
    # REGISTER BLUEPRINTS
    # ==========================================================================

    app.register_blueprint(split_bp, url_prefix='/api/split')

    app.config['MAX_CONTENT_LENGTH'] = app_config.flask.max_content_length_bytes
    app.json.ensure_ascii = False

    logger.info(
        "Initialized Flask app",
        extra={
            'run_name': app_config.logging.run_name,
            'default_mode': app_config.splitting.mode
        }
    )

    # ==========================================================================
    # CORE ROUTES
    # ==========================================================================

    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint for monitoring."""
        return {
            'status': 'healthy',
            'run_name': app_config.logging.run_name,
            'version': __version__
        }, 200

    # ==========================================================================
    # ERROR HANDLERS
    # ==========================================================================

    @app.errorhandler(413)
    def request_entity_too_large(error):
        """Handle payload too large errors."""
        return jsonify({
            'error': f'Request is too large. Maximum size is {app_config.flask.max_content_length_bytes / (1024*1024):.1f}MB.'
        }), 413

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    return app


def main():
    """Run the development server."""
    app = create_app()
    flask_config = get_config().flask
    app.run(
        debug=flask_config.debug,
        host=flask_config.host,
        port=flask_config.port
    )


if __name__ == '__main__':
    main()
