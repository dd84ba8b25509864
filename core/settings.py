"""
Django Settings for Location History Application
Configuration for PostgreSQL database
"""
import os
from pathlib import Path

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'django-insecure-change-this-in-production-!!!')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.environ.get('DJANGO_DEBUG', 'true').lower() in ('1', 'true', 'yes')

ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', '*').split(',')

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'apps.locations',  # Location history application
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'core.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'core.wsgi.application'

# Database configuration - PostgreSQL
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': os.environ.get('LOCATIONS_DB_NAME', 'locations'),
        'USER': os.environ.get('LOCATIONS_DB_USER', 'locations'),  # Read-write user
        'PASSWORD': os.environ.get('LOCATIONS_DB_PASSWORD', ''),
        'HOST': os.environ.get('LOCATIONS_DB_HOST', 'localhost'),
        'PORT': os.environ.get('LOCATIONS_DB_PORT', '5432'),
    }
}

# Optional read-only connection for map and export queries
if os.environ.get('LOCATIONS_ANALYTICS_DB_USER'):
    DATABASES['analytics'] = {
        **DATABASES['default'],
        'USER': os.environ['LOCATIONS_ANALYTICS_DB_USER'],
        'PASSWORD': os.environ.get('LOCATIONS_ANALYTICS_DB_PASSWORD', ''),
    }

# Database router to use analytics user for read operations
DATABASE_ROUTERS = ['apps.locations.db_router.LocationsRouter']

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]

LOGIN_URL = 'login'
LOGIN_REDIRECT_URL = 'locations:map'

# Internationalization
LANGUAGE_CODE = 'en-gb'
TIME_ZONE = os.environ.get('LOCATIONS_TIME_ZONE', 'Europe/Berlin')
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Media files
MEDIA_URL = '/media/'
MEDIA_ROOT = BASE_DIR / 'media'

# Export files are written here and served as exports/<name>.json
EXPORTS_ROOT = Path(os.environ.get('LOCATIONS_EXPORTS_ROOT', BASE_DIR / 'public' / 'exports'))
EXPORTS_URL = 'exports/'

# Map defaults, overridable per request with query parameters
LOCATIONS_MAP = {
    'METERS_BETWEEN_ROUTES': 500,
    'MINUTES_BETWEEN_ROUTES': 60,
    'FOG_OF_WAR_METERS': 100,
    'DEFAULT_CENTER': (52.514568, 13.350111),
    'DEFAULT_ZOOM': 14,
}

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Logging configuration
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '[{asctime}] {levelname} {name} {message}',
            'style': '{',
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': BASE_DIR / 'locations.log',
            'formatter': 'verbose',
        },
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'loggers': {
        'django': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
        },
        'apps.locations': {
            'handlers': ['console', 'file'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}
