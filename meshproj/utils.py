#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np

from meshproj.obj import Face, Mesh


# random_mesh の頂点座標の範囲 (x, y, z)
_LOW = (-20.0, -20.0, 15.0)
_HIGH = (20.0, 20.0, 50.0)


def setup_logging(level=logging.INFO):
    """ログの出力を設定する処理

    :param int level: ログレベル
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def random_mesh(n):
    """ランダムな三角形 n 枚からなるメッシュを生成する処理

    面ごとに独立した 3 頂点を持ち, 3 頂点とも面の法線を参照する

    :rtype: meshproj.obj.Mesh
    """
    triangles = np.random.uniform(_LOW, _HIGH, size=(n, 3, 3))
    normals = np.cross(triangles[:, 1] - triangles[:, 0],
                       triangles[:, 2] - triangles[:, 0])
    faces = [Face(range(3 * i, 3 * i + 3), (i, i, i)) for i in range(n)]
    return Mesh(triangles.reshape((-1, 3)), normals, faces)
