import logging

import uvicorn
from fastapi import Depends, FastAPI
from sqlalchemy.exc import SQLAlchemyError

from clinic_api.auth.dependencies import get_current_user
from clinic_api.core.config import AppConfig, load_config
from clinic_api.core.errors import register_exception_handlers
from clinic_api.core.logging_config import configure_logging
from clinic_api.core.middleware import setup_middlewares
from clinic_api.database import build_engine, build_session_factory, create_tables
from clinic_api.routes import auth_routes, clinic_routes

logger = logging.getLogger(__name__)


def create_app(config: AppConfig | None = None) -> FastAPI:
    config = config or load_config()
    configure_logging(config.log_level)

    engine = build_engine(config.database_url)

    app = FastAPI(title='Clinic API')
    app.state.config = config
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    register_exception_handlers(app)
    setup_middlewares(app, config)

    @app.on_event('startup')
    def initialize_database() -> None:
        try:
            create_tables(engine)
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')
            raise

    @app.on_event('shutdown')
    def dispose_engine() -> None:
        engine.dispose()

    @app.get('/')
    def root():
        return {'status': 'Clinic API Running'}

    clinic_dependencies = []
    if config.clinic_requires_auth:
        clinic_dependencies.append(Depends(get_current_user))
    else:
        logger.warning('Clinic listing is served without authentication (CLINIC_REQUIRES_AUTH is off).')

    app.include_router(auth_routes.router)
    app.include_router(clinic_routes.router, prefix='/api/clinic', dependencies=clinic_dependencies)

    return app


def run() -> None:
    config = load_config()
    app = create_app(config)
    logger.info('Server is running on http://%s:%s', config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == '__main__':
    run()
