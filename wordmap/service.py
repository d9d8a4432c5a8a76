
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

from wordmap.constants import config
from wordmap.errors import (
    InvalidDictionaryError,
    InvalidInputError,
    UnknownWordError,
    WordMapError,
    WordOverflowError,
)
from wordmap.mapper import WordMapper, get_domain
from wordmap.ndjson_log import NDJSONLogger

logger = logging.getLogger(__name__)


class ValueTooLargeError(WordMapError):
    pass


@lru_cache(1)
def get_mapper():
    if config.dictionary_path is None:
        raise InvalidDictionaryError(
            'No dictionary configured, set WORDMAP_DICTIONARY')
    return WordMapper.from_file(config.dictionary_path)


@lru_cache(1)
def get_log():
    return NDJSONLogger(config.log_path)


def requested_domain():
    return get_domain(request.args.get('domain', 'big'))


def check_size(value):
    if value.bit_length() > config.max_value_bits:
        raise ValueTooLargeError(
            'Value has {} bits, the service returns at most {}'.format(
                value.bit_length(), config.max_value_bits))
    return value


def error_response(e, status):
    get_log().record('error', path=request.path, error=str(e), status=status)
    return jsonify({'error': str(e)}), status


@app.errorhandler(InvalidInputError)
def invalid_input(e):
    return error_response(e, 400)


@app.errorhandler(UnknownWordError)
def unknown_word(e):
    return error_response(e, 400)


@app.errorhandler(WordOverflowError)
def overflow(e):
    return error_response(e, 422)


@app.errorhandler(ValueTooLargeError)
def too_large(e):
    return error_response(e, 413)


@app.errorhandler(InvalidDictionaryError)
@app.errorhandler(OSError)
def dictionary_unavailable(e):
    logger.error('Dictionary unavailable: %s', e)
    return error_response(e, 503)


@app.route('/')
def info():
    radix = len(get_mapper())
    return jsonify({
        'dictionary': config.dictionary_path.name,
        'radix': radix,
    })


@app.route('/encode/<int:value>')
def encode(value):
    words = get_mapper().encode(check_size(value), requested_domain())
    get_log().record('encode', value=value, words=words)
    return jsonify({'value': value, 'words': words})


@app.route('/decode/<string:words>')
def decode(words):
    value = check_size(get_mapper().decode(words, requested_domain()))
    get_log().record('decode', value=value, words=words)
    return jsonify({'words': ' '.join(words.split()), 'value': value})


@app.route('/log', methods=['POST'])
def log_data():
    get_log().record('client', data=request.get_json(force=True))
    return "200"


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument('--prod', action='store_true')
    return parser.parse_args()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    args = parse_args()
    # Fail before serving if the dictionary is missing or invalid.
    get_mapper()
    if args.prod:
        ssl_context = (
            os.environ['SSL_CERT_PATH'],
            os.environ['SSL_KEY_PATH'],
        )
        app.run(ssl_context=ssl_context,
                host=config.host, port=config.port, debug=False)
    else:
        app.run(port=config.port, debug=True)
