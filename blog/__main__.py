# blog/__main__.py
import logging

from werkzeug.serving import make_server

from blog import create_app


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    host, port = app.config["HOST"], app.config["PORT"]

    # make_server binds the socket before returning
    server = make_server(host, port, app, threaded=True)
    app.logger.info("Server is running on http://localhost:%d", server.server_port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        app.logger.info("Shutting down.")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
