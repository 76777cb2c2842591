
from flask import Flask
from flask import jsonify
from flask import request
from flask_cors import CORS
app = Flask(__name__)
CORS(app)

from functools import lru_cache
import argparse
import logging
import os

from ip3 import encoder

logger = logging.getLogger(__name__)


@lru_cache(2**13)
def codes_from_ipv4(text):
    address = encoder.parse_ipv4(text)
    return {
        'ipv4': encoder.format_ipv4(address),
        'ip3': str(encoder.encode(address)),
    }


@lru_cache(2**13)
def codes_from_ip3(text):
    return {
        'ipv4': encoder.ip3_to_ipv4(text),
        'ip3': str(encoder.parse_ip3(text)),
    }


@app.errorhandler(encoder.MalformedInput)
def malformed_input(e):
    return jsonify({'error': str(e)}), 400


@app.errorhandler(encoder.WordNotFound)
def word_not_found(e):
    return jsonify({'error': str(e), 'word': e.word}), 404


@app.route('/')
def index():
    return jsonify({
        'words': len(encoder.default_encoder().word_list),
        'routes': ['/ip3/<ipv4>', '/ipv4/<ip3>', '/me'],
    })

@app.route('/ip3/<string:ipv4>')
def get_ip3(ipv4):
    return jsonify(codes_from_ipv4(ipv4))

@app.route('/ipv4/<string:words>')
def get_ipv4(words):
    return jsonify(codes_from_ip3(words))

@app.route('/me')
def get_me():
    return jsonify(codes_from_ipv4(request.remote_addr or ''))

def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument('--prod', action='store_true')
    return parser.parse_args()

if __name__ == "__main__":
    args = parse_args()
    if args.prod:
        ssl_context = (
            os.environ['SSL_CERT_PATH'],
            os.environ['SSL_KEY_PATH'],
        )
        logger.info('Serving with TLS on 0.0.0.0')
        app.run(ssl_context=ssl_context,
                host='0.0.0.0', debug=False)
    else:
        app.run(debug=True)
