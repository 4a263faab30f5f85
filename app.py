# app.py
from flask import Flask
from config.settings import get_config
from extensions.database import db, migrate
from extensions.logger import init_logger
from extensions.commands import init_commands
from utils.response import json_response
from utils.exceptions import BizError
from controllers.project_controller import project_bp
from controllers.test_plan_controller import test_plan_bp
from controllers.test_step_controller import test_step_bp
from controllers.test_step_execution_controller import execution_bp
from controllers.permission_controller import permission_bp
from controllers.role_controller import role_bp
from controllers.user_controller import user_bp


def create_app(config_name="development"):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    # extensions
    db.init_app(app)
    migrate.init_app(app, db)
    init_logger(app)
    init_commands(app)
    app.logger.info("database URI: %s", app.config["SQLALCHEMY_DATABASE_URI"])

    # projects / plans / steps / executions
    app.register_blueprint(project_bp)
    app.register_blueprint(test_plan_bp)
    app.register_blueprint(test_step_bp)
    app.register_blueprint(execution_bp)
    # access control
    app.register_blueprint(permission_bp)
    app.register_blueprint(role_bp)
    app.register_blueprint(user_bp)

    @app.errorhandler(404)
    def not_found(e):
        return json_response(message="Endpoint not found", code=404, error="not_found")

    @app.errorhandler(BizError)
    def _biz_err(e: BizError):
        return json_response(code=e.code, message=e.message, data=e.data, error=e.error)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=8888, debug=True)
