#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import os

import numpy as np
from PIL import Image

from meshproj.errors import ConfigurationError


DOUBLE = np.float64

LOGGER = logging.getLogger(__name__)


def emit_pixels(colors):
    """色 (0.0-1.0) を 8 bit の RGB に変換する処理

    255 倍して 0 方向に切り捨てる
    範囲外の値は 0 と 255 に飽和させ, nan は 0 とする

    :param numpy.ndarray colors: 行優先に並んだ画素の色 (... x 3)
    :return: R, G, B の順に並んだバイト列
    :rtype: bytes
    """
    with np.errstate(invalid='ignore', over='ignore'):
        scaled = np.asarray(colors, dtype=DOUBLE) * 255.0
    scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
    return np.clip(scaled, 0.0, 255.0).astype(np.uint8).tobytes()


class PpmImage:
    """PPM 画像を表すクラス"""

    def __init__(self, name, width, height, data, depth=8):
        """
        :param str name: コメントに書き込む名前
        :param int width:
        :param int height:
        :param bytes data: RGB の画素データ (行優先)
        :param int depth: 各色の階調数 (bit)
        """
        self.name = name
        self.width = width
        self.height = height
        self.depth = depth
        self.image = np.frombuffer(data, dtype=np.uint8).reshape(
            (height * width, 3))

    def header(self, magic):
        """PPM のヘッダ (magic, コメント, サイズ, 最大値)"""
        return '{0}\n# {1}\n{2:d} {3:d}\n{4:d}\n'.format(
            magic, self.name, self.width, self.height, 2 ** self.depth - 1)

    def dump(self, fp):
        """ファイルに画像データを書き込む処理 (P3, テキスト)

        1 行に 1 画素の R G B を書く
        """
        fp.write(self.header('P3'))
        fp.writelines('{0:3d} {1:3d} {2:3d}\n'.format(r, g, b)
                      for r, g, b in self.image.tolist())

    def dump_binary(self, fp):
        """ファイルに画像データを書き込む処理 (P6, バイナリ)"""
        fp.write(self.header('P6').encode('ascii'))
        fp.write(self.image.tobytes())


def save_image(path, data, width, height, plain=False):
    """画素データを画像ファイルに保存する処理

    拡張子が .ppm であれば PPM (plain が真なら P3, 偽なら P6),
    それ以外は Pillow で書き出す

    :param str path: 保存先
    :param bytes data: RGB の画素データ (行優先)
    :param bool plain: PPM をテキスト形式 (P3) で書くかどうか
    """
    LOGGER.info('writing %dx%d image to %s', width, height, path)
    if os.path.splitext(path)[1].lower() == '.ppm':
        image = PpmImage(os.path.basename(path), width, height, data)
        if plain:
            with open(path, 'w') as f:
                image.dump(f)
        else:
            with open(path, 'wb') as f:
                image.dump_binary(f)
        return
    try:
        Image.frombytes('RGB', (width, height), bytes(data)).save(path)
    except ValueError as e:
        raise ConfigurationError(
            'Cannot write image {0}: {1}'.format(path, e)) from e
