#!/usr/bin/env python3
"""
Entry point for the Fennec FC records service.

Usage:
    python run.py

Environment Variables:
    FLASK_ENV: development, production or testing (default: development)
    PORT: Port to run on (default: 8000)
    DATABASE_URL: SQLAlchemy database URL (default: sqlite:///fennec_fc.db)
    LOG_LEVEL: Logging level name (default: DEBUG in development, INFO otherwise)
"""
import os

from fennec.app import create_app


def main():
    app = create_app()
    port = int(os.getenv('PORT', 8000))
    debug = os.getenv('FLASK_ENV', 'development') == 'development'

    app.logger.info(f"Server running on http://localhost:{port}")
    app.run(host='0.0.0.0', port=port, debug=debug)


if __name__ == '__main__':
    main()
