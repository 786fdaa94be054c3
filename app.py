import logging

from cep_weather import config
from cep_weather.web import create_app

logging.basicConfig(level=logging.INFO)

# WSGI entry point: `flask --app app run` or any WSGI server pointed at app:app
app = create_app()


if __name__ == "__main__":
    # For development only – use a proper WSGI server in production
    app.logger.info("Listening on port %s", config.PORT)
    app.run(host="0.0.0.0", port=config.PORT)
