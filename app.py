#!/usr/bin/env python3
"""
Main entry point for the Web Dev Tools application.
Imports the Flask app from the src directory and runs it.
"""

import sys
import os
import argparse
import logging
from pathlib import Path

# Add the src directory to the Python path so we can import from it
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from main import app

logger = logging.getLogger(__name__)

def get_config_directory():
    """Get the config directory path."""
    config_dir = os.environ.get('WEBDEV_TOOLS_CONFIG_DIR')
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/webdev-tools
    return Path.home() / '.config' / 'webdev-tools'

def write_port_file(port):
    """Write the port number to .port file for other processes to read."""
    config_dir = get_config_directory()
    config_dir.mkdir(parents=True, exist_ok=True)
    port_file = config_dir / ".port"
    with open(port_file, 'w') as f:
        f.write(str(port))
    logger.info("Port %s written to %s", port, port_file)

def cleanup_port_file():
    """Remove the .port file on shutdown."""
    port_file = get_config_directory() / ".port"
    if port_file.exists():
        port_file.unlink()
        logger.info("Port file cleaned up")

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Web Dev Tools Server')
    parser.add_argument('--port', '-p', type=int, default=8000,
                       help='Port to run the server on (default: 8000)')
    parser.add_argument('--host', default='127.0.0.1',
                       help='Host to bind to (default: 127.0.0.1)')
    args = parser.parse_args()

    logging.basicConfig(
        level=os.environ.get('WEBDEV_TOOLS_LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    os.chdir(project_root)
    write_port_file(args.port)

    try:
        logger.info("Starting Web Dev Tools on http://%s:%s", args.host, args.port)
        app.run(host=args.host, port=args.port, debug=True)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        cleanup_port_file()
