import click

from bingo import create_app, socketio

app = create_app()


@click.command()
@click.option('--host', default=None, help='Interface to bind (defaults to HOST).')
@click.option('--port', default=None, type=int, help='Port to listen on (defaults to PORT).')
@click.option('--debug/--no-debug', default=False)
def main(host, port, debug):
    """Serve the bingo backend with the Socket.IO server."""
    host = host or app.config['HOST']
    port = port or app.config['PORT']
    app.logger.info(f"[startup] listening on {host}:{port}")
    # Threading mode falls back to the Werkzeug server when no eventlet/gevent is installed
    socketio.run(app, host=host, port=port, debug=debug, allow_unsafe_werkzeug=True)


if __name__ == '__main__':
    main()
