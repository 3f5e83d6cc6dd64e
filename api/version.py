from http.server import BaseHTTPRequestHandler
import json
import logging
import subprocess

from order_processor import SetMappingError, __version__, load_set_mappings_file
from order_processor.detector import FORMATS
from order_processor.logging_setup import configure_logging

configure_logging()
logger = logging.getLogger(__name__)


def git_commit():
    try:
        return subprocess.check_output(['git', 'rev-parse', '--short', 'HEAD'],
                                       stderr=subprocess.DEVNULL).decode('utf-8').strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


def version_info():
    """Build and configuration details for the status endpoint"""
    try:
        set_mappings = len(load_set_mappings_file())
    except SetMappingError as e:
        logger.warning("Set mappings unavailable: %s", e)
        set_mappings = 0

    return {
        'commit': git_commit(),
        'version': __version__,
        'formats': [fmt.name for fmt in FORMATS],
        'modes': ['csv', 'urls'],
        'setMappings': set_mappings,
    }


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        try:
            response = version_info()

            self.send_response(200)
            self.send_header('Content-type', 'application/json')
            self.send_header('Access-Control-Allow-Origin', '*')
            self.end_headers()

            self.wfile.write(json.dumps(response).encode('utf-8'))
            return

        except Exception as e:
            logger.exception("Version lookup failed")
            self.send_response(500)
            self.send_header('Content-type', 'application/json')
            self.end_headers()
            self.wfile.write(json.dumps({'error': str(e)}).encode('utf-8'))

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)
