import logging

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_marshmallow import Marshmallow
from flask_cors import CORS


db = SQLAlchemy()
ma = Marshmallow()


def create_app(config_overrides=None, store=None, environ=None):
    from .config import load_config
    from .errors import register_error_handlers
    from .store import build_store, register_store

    app = Flask(__name__)
    app.config.update(load_config(environ=environ, overrides=config_overrides))
    app.logger.setLevel(app.config['LOG_LEVEL'])
    logging.getLogger('pmo').setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    ma.init_app(app)
    CORS(app)
    register_error_handlers(app)

    with app.app_context():
        from .controllers.home_controller import home_blueprint
        from .controllers.project_controller import project_blueprint
        from .controllers.developer_controller import developer_blueprint
        from .controllers.assignment_controller import assignment_blueprint
        from .controllers.dashboard_controller import dashboard_blueprint
        app.register_blueprint(home_blueprint)
        app.register_blueprint(project_blueprint, url_prefix="/project")
        app.register_blueprint(developer_blueprint, url_prefix="/developer")
        app.register_blueprint(assignment_blueprint, url_prefix="/assignment")
        app.register_blueprint(dashboard_blueprint, url_prefix="/dashboard")

        if store is None:
            store = build_store(app.config)
        register_store(app, store)

    return app
