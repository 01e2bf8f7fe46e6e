from flask import current_app, jsonify
from marshmallow import ValidationError as SchemaValidationError


class PmoError(Exception):
    status_code = 500


class ConfigurationError(PmoError):
    pass


class StoreError(PmoError):
    status_code = 502

    def __init__(self, message, collection=None, record_id=None):
        super().__init__(message)
        self.collection = collection
        self.record_id = record_id


class ValidationError(PmoError):
    status_code = 400

    def __init__(self, message, fields=None):
        super().__init__(message)
        self.fields = fields or {}


class NotFoundError(PmoError):
    status_code = 404


def register_error_handlers(app):

    @app.errorhandler(SchemaValidationError)
    def handle_schema_error(error):
        current_app.logger.error("Invalid payload: %s", error.messages)
        return jsonify({'error': 'Invalid payload', 'fields': error.messages}), 400

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        current_app.logger.error("Validation failed: %s", error)
        return jsonify({'error': str(error), 'fields': error.fields}), error.status_code

    @app.errorhandler(NotFoundError)
    def handle_not_found(error):
        return jsonify({'error': str(error)}), error.status_code

    @app.errorhandler(StoreError)
    def handle_store_error(error):
        current_app.logger.error("Store request failed on %s: %s", error.collection, error)
        return jsonify({'error': str(error)}), error.status_code
