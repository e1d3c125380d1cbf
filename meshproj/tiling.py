#!/usr/bin/env python
# -*- coding: utf-8 -*-

import math


class TileLayout:
    """プリミティブを画素のブロック (タイル) に割り当てる配置"""

    def __init__(self, pixels_w, pixels_h, tiles_per_row, tiles_per_col,
                 width=None, height=None):
        """
        :param int pixels_w: 1 タイルの幅 (画素)
        :param int pixels_h: 1 タイルの高さ (画素)
        :param int tiles_per_row: 1 行あたりのタイル数
        :param int tiles_per_col: 1 列あたりのタイル数
        :param int width: 画像の幅 (省略時はタイルの並びの幅)
        :param int height: 画像の高さ (省略時はタイルの並びの高さ)
        """
        self.pixels_w = pixels_w
        self.pixels_h = pixels_h
        self.tiles_per_row = tiles_per_row
        self.tiles_per_col = tiles_per_col
        self.width = pixels_w * tiles_per_row if width is None else width
        self.height = pixels_h * tiles_per_col if height is None else height

    @property
    def capacity(self):
        """重ならずに配置できるプリミティブの数"""
        return self.tiles_per_row * self.tiles_per_col

    def _tile(self, index):
        row = index // self.tiles_per_row
        return row, index - self.tiles_per_row * row

    def origin(self, index):
        """i 番目のプリミティブのタイルの左上の画素 (x, y)

        画素数を超えたプリミティブは先頭から巻き戻して重ねる
        タイルが画像の下にはみ出す場合は capacity で巻き戻す
        """
        index %= self.width * self.height
        row, col = self._tile(index)
        if row * self.pixels_h + self.pixels_h > self.height:
            row, col = self._tile(index % self.capacity)
        return col * self.pixels_w, row * self.pixels_h

    def block(self, index):
        """i 番目のプリミティブが塗る範囲 (行のスライス, 列のスライス)"""
        x, y = self.origin(index)
        return slice(y, y + self.pixels_h), slice(x, x + self.pixels_w)

    def __eq__(self, other):
        if not isinstance(other, TileLayout):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def as_tuple(self):
        return (self.pixels_w, self.pixels_h,
                self.tiles_per_row, self.tiles_per_col)

    def __repr__(self):
        return ('TileLayout(pixels_w={0:d}, pixels_h={1:d}, '
                'tiles_per_row={2:d}, tiles_per_col={3:d})'
                .format(*self.as_tuple()))


def plan_tiles(count, width, height):
    """タイルの配置を求める処理

    縦横比 width / height を保ったまま
    tiles_per_col * tiles_per_row ~= count となるように分割する
    tiles_per_row = tiles_per_col * width / height より
    tiles_per_col = sqrt(count * height / width)

    :param int count: プリミティブの数
    :param int width: 画像の幅
    :param int height: 画像の高さ
    :rtype: TileLayout
    """
    # 画素より多い場合は 1 画素ずつ
    one_pixel = TileLayout(1, 1, width, height, width, height)
    if count > width * height:
        return one_pixel
    if count == 0:
        return TileLayout(width, height, 1, 1, width, height)

    tiles_per_col = int(math.sqrt(count * (height / width)))
    tiles_per_col = min(max(tiles_per_col, 1), count)
    tiles_per_row = count // tiles_per_col
    pixels_w = width // tiles_per_row
    pixels_h = height // tiles_per_col
    # 切り捨てでタイルの大きさが 0 になる場合
    if pixels_w == 0 or pixels_h == 0:
        return one_pixel
    return TileLayout(pixels_w, pixels_h, tiles_per_row, tiles_per_col,
                      width, height)
