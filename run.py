# run.py
"""
Starts one of the two services on the port from the environment.

Usage:
    python run.py api     # REST API on PORT (default 5000)
    python run.py web     # web front-end on WEB_PORT (default 3000), calling API_URL
"""
import argparse
from contacts_app.config import Config

def main():
    parser = argparse.ArgumentParser(description="Run the contacts API or web front-end.")
    parser.add_argument('service', choices=['api', 'web'])
    parser.add_argument('--host', default='127.0.0.1')
    args = parser.parse_args()

    debug = Config.APP_ENV != 'production'
    if args.service == 'api':
        from contacts_app import create_app
        app = create_app()
        port = app.config['PORT']
    else:
        from contacts_app.web import create_web_app
        app = create_web_app()
        port = app.config['WEB_PORT']

    app.logger.info(f"Server is running on http://{args.host}:{port}")
    app.run(host=args.host, port=port, debug=debug)

if __name__ == "__main__":
    main()
