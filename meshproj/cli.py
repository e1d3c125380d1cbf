#!/usr/bin/env python
# -*- coding: utf-8 -*-

import argparse
import logging
import os
import sys

from meshproj.errors import ConfigurationError, ProjectorError
from meshproj.image import save_image
from meshproj.obj import ObjLoader
from meshproj.projector import ProjectionMode, ProjectionParams, Projector
from meshproj.utils import setup_logging


LOGGER = logging.getLogger(__name__)


def _mode(token):
    try:
        return ProjectionMode.from_token(token)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _size(token):
    try:
        value = int(token)
    except ValueError:
        raise argparse.ArgumentTypeError(
            'invalid size {0!r}'.format(token)) from None
    if value <= 0:
        raise argparse.ArgumentTypeError(
            'size must be positive, got {0:d}'.format(value))
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='meshproj',
        description='Visualize the ordering of a mesh as a coarse image')
    parser.add_argument('--obj', required=True, metavar='file',
                        help='OBJ file to read')
    parser.add_argument('--out', metavar='file', default=None,
                        help='Write image to <file> (.png, .ppm, ...). '
                             'Defaults to the OBJ path with .png')
    parser.add_argument('-w', '--width', type=_size, default=512,
                        help='Image width in pixels')
    parser.add_argument('-H', '--height', type=_size, default=512,
                        help='Image height in pixels')
    parser.add_argument('-p', '--proj_type', type=_mode,
                        default=ProjectionMode.face, metavar='mode',
                        help='face|f, vertex|v, vertex_normal|vn or '
                             'face_normal|fn')
    parser.add_argument('--plain', action='store_true',
                        help='Write .ppm output as plain text (P3)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def parse_args(argv=None):
    """引数を解析する処理

    未知の投影モードは致命的なエラーとして終了する (終了コード 2)
    """
    return build_parser().parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    output = args.out
    if output is None:
        output = os.path.splitext(args.obj)[0] + '.png'

    try:
        mesh = ObjLoader(args.obj).load()
        params = ProjectionParams(args.width, args.height, args.proj_type)
        pixels = Projector().project(mesh, params)
        save_image(output, pixels, params.width, params.height,
                   plain=args.plain)
    except ProjectorError as e:
        LOGGER.error('%s', e)
        return 1
    except OSError as e:
        LOGGER.error('Failed to write %s: %s', output, e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
