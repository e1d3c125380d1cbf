#!/usr/bin/env python
# -*- coding: utf-8 -*-


class ProjectorError(Exception):
    """meshproj が送出する例外の基底クラス"""


class MeshFileError(ProjectorError):
    """メッシュファイルが存在しない, または読み込めない"""


class ParseError(ProjectorError):
    """メッシュファイルの内容が不正"""

    def __init__(self, message, lineno=None):
        """
        :param str message: エラーの内容
        :param int lineno: 問題のある行番号 (1 始まり)
        """
        if lineno is not None:
            message = 'line {0:d}: {1}'.format(lineno, message)
        super().__init__(message)
        self.lineno = lineno


class IndexOutOfRangeError(ProjectorError):
    """面が存在しない頂点や法線を参照している"""


class ConfigurationError(ProjectorError):
    """画像サイズや投影モードの指定が不正"""
