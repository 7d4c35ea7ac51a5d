"""
Split Routes Module
===================
REST API endpoints for splitting transcripts.

Endpoints:
- POST /api/split        - Split a list of transcript segments
- GET  /api/split/modes  - List available modes and the configured defaults
"""

from flask import Blueprint, request, jsonify, current_app
import uuid

from ..models import TranscriptSegment, SplitOptions
from ..segmentation import TranscriptSplitter
from ..logging_config import get_split_logger, log_split_decision

# Configure logging
logger = get_split_logger("routes.split")

# Create blueprint
split_bp = Blueprint('split', __name__)


def _splitter() -> TranscriptSplitter:
    return TranscriptSplitter(config=current_app.app_config.splitting)


@split_bp.route('', methods=['POST'])
def split_transcript():
    """
    Split transcript segments with one of the four modes.

    Request JSON:
        {
            "segments": [                      # Required
                {"speaker": "A", "startTimeSeconds": 0.0, "text": "Hello. World."}
            ],
            "options": {                       # Optional: configured defaults apply
                "mode": "sentence",
                "maxDuration": 30,
                "maxCharacters": 100,
                "minCharacters": 20,
                "preserveSpeaker": true
            }
        }

    Response JSON:
        {
            "success": true,
            "request_id": "...",
            "mode": "sentence",
            "segments": [...],
            "segment_count": 2,
            "input_count": 1
        }
    """
    request_id = uuid.uuid4().hex[:12]
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Request body must be a JSON object'}), 400

        raw_segments = data.get('segments')
        if not isinstance(raw_segments, list):
            return jsonify({'error': "'segments' must be a list"}), 400

        limit = current_app.app_config.flask.max_segments_per_request
        if len(raw_segments) > limit:
            return jsonify({'error': f'Too many segments: {len(raw_segments)} > {limit}'}), 413

        segments = [TranscriptSegment.from_dict(s) for s in raw_segments]

        splitter = _splitter()
        options = SplitOptions.from_dict(data.get('options') or {}, defaults=splitter.default_options)

        logger.info(
            "Splitting transcript",
            extra={
                'request_id': request_id,
                'mode': options.mode.value if options.mode else 'none',
                'input_count': len(segments)
            }
        )

        result = splitter.split(segments, options)

        log_split_decision(
            "request_complete",
            {
                'mode': options.mode.value if options.mode else None,
                'input_count': len(segments),
                'output_count': len(result)
            },
            request_id=request_id
        )

        return jsonify({
            'success': True,
            'request_id': request_id,
            'mode': options.mode.value if options.mode else None,
            'segments': [s.to_dict() for s in result],
            'segment_count': len(result),
            'input_count': len(segments)
        }), 200

    except ValueError as e:
        logger.warning(f"Rejected split request: {e}", extra={'request_id': request_id})
        return jsonify({'error': str(e)}), 400
    except Exception as e:
        logger.error(f"Split error: {str(e)}", extra={'request_id': request_id})
        return jsonify({'error': 'Internal server error'}), 500


@split_bp.route('/modes', methods=['GET'])
def list_modes():
    """
    List available split modes with the configured default options.

    Response JSON:
        {
            "modes": [{"mode": "sentence", "name": "sentence", "description": "..."}, ...],
            "defaults": {"mode": "semantic", "maxDuration": 30.0, ...}
        }
    """
    splitter = _splitter()
    return jsonify({
        'modes': splitter.get_strategy_info(),
        'defaults': splitter.default_options.to_dict()
    }), 200
