import os

from .errors import ConfigurationError


REQUIRED_SETTINGS = ('STORE_API_KEY', 'STORE_PROJECT_ID')

# (config key, environment variable, default)
ENV_SETTINGS = (
    ('STORE_API_KEY', 'PMO_STORE_API_KEY', None),
    ('STORE_PROJECT_ID', 'PMO_STORE_PROJECT_ID', None),
    ('STORE_AUTH_DOMAIN', 'PMO_STORE_AUTH_DOMAIN', None),
    ('STORE_BUCKET', 'PMO_STORE_BUCKET', None),
    ('STORE_MESSAGING_SENDER_ID', 'PMO_STORE_MESSAGING_SENDER_ID', None),
    ('STORE_APP_ID', 'PMO_STORE_APP_ID', None),
    ('STORE_MEASUREMENT_ID', 'PMO_STORE_MEASUREMENT_ID', None),
    ('STORE_BACKEND', 'PMO_STORE_BACKEND', 'firestore'),
    ('STORE_DATABASE', 'PMO_STORE_DATABASE', '(default)'),
    ('STORE_TIMEOUT', 'PMO_STORE_TIMEOUT', '10'),
    ('SQLALCHEMY_DATABASE_URI', 'PMO_DATABASE_URI', 'sqlite:///pmo.db'),
    ('LOG_LEVEL', 'PMO_LOG_LEVEL', 'INFO'),
)

STORE_BACKENDS = ('firestore', 'sql')


def load_config(environ=None, overrides=None):
    """
    Builds the application settings from environment variables.

    :param environ: mapping to read from, defaults to ``os.environ``.
    :param overrides: explicit settings that win over the environment.
    :return: dict of settings ready for ``app.config.update``.
    :raises ConfigurationError: when the store API key or project id is missing,
        or when a setting has an unusable value.
    """
    environ = os.environ if environ is None else environ

    config = {}
    for key, variable, default in ENV_SETTINGS:
        config[key] = environ.get(variable) or default
    config.update(overrides or {})

    missing = [key for key in REQUIRED_SETTINGS if not config.get(key)]
    if missing:
        variables = [variable for key, variable, _ in ENV_SETTINGS if key in missing]
        raise ConfigurationError(f"Missing store connection settings: {', '.join(variables)}")

    if config['STORE_BACKEND'] not in STORE_BACKENDS:
        raise ConfigurationError(f"Unknown store backend: {config['STORE_BACKEND']}")

    try:
        config['STORE_TIMEOUT'] = float(config['STORE_TIMEOUT'])
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid store timeout: {config['STORE_TIMEOUT']}")

    config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    return config
