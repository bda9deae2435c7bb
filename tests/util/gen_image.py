#
# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

import argparse
import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image


class PairGenerator:
    """Create pairs of 8-bit grayscale images that differ in known places."""

    def get_images(self, pattern, image_size, seed):
        func = getattr(self, pattern, None)
        if func is None:
            return None
        return func(image_size, np.random.default_rng(seed))

    def save_images(self, images, dest_folder, file_name):
        paths = []
        for index, arr in enumerate(images):
            path = str((Path(dest_folder) / f"{file_name}_{index}.png")
                       .absolute())
            Image.fromarray(arr.astype(np.uint8)).save(path)
            paths.append(path)
        return tuple(paths)

    def random(self, image_size, rng):
        height, width = image_size
        image0 = rng.integers(0, 256, size=(height, width))
        image1 = rng.integers(0, 256, size=(height, width))
        return image0, image1

    def stripe(self, image_size, rng):
        height, width = image_size
        image0 = np.zeros((height, width), dtype=np.int64)
        image0[:, ::4] = 200
        image1 = np.zeros((height, width), dtype=np.int64)
        image1[::4, :] = 200
        return image0, image1

    def square(self, image_size, rng):
        """Identical noise images except for a bright square in the middle."""
        height, width = image_size
        image0 = rng.integers(0, 64, size=(height, width))
        image1 = image0.copy()
        image1[height // 4:3 * height // 4, width // 4:3 * width // 4] += 150
        return image0, image1


class ImageGenerator:
    def __init__(self, dest, recipes, logger=None):
        self.logger = logger or logging.getLogger(__name__)
        self.dest = dest
        self.recipes = recipes
        self.generator = PairGenerator()

    def gen(self):

        results = []

        for recipe in self.recipes:
            items = recipe.split(':')
            item_len = len(items)
            if not (1 <= item_len <= 3):
                raise RuntimeError(
                    'Value should be pattern[:image_size:seed] format')

            pattern = items[0]
            image_size_str = '32x24' if item_len <= 1 else items[1]
            image_size = list(map(lambda x: int(x), image_size_str.split('x')))
            seed = 0 if item_len <= 2 else int(items[2])

            os.makedirs(self.dest, exist_ok=True)

            images = self.generator.get_images(pattern, image_size, seed)
            if images is None:
                raise RuntimeError(
                    "There is no generator for '{}'".format(pattern))

            file_name = f'{pattern}_{image_size_str}_{seed}'
            image_paths = self.generator.save_images(
                images, self.dest, file_name)
            self.logger.info('  Generated %s...', image_paths)
            results.append(image_paths)

        self.logger.info('[Finished] Dataset generation')
        return results


def main():
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(
        description='Generate Image Pairs')
    parser.add_argument(
        'recipes',
        metavar='pattern[:image_size:seed]',
        default=['square:32x24'], nargs='+',
        help='image pair pattern to write (default: square:32x24)')

    parser.add_argument('--dest', '-d', default='.', help='destination folder')
    args = parser.parse_args()
    generator = ImageGenerator(args.dest, args.recipes)
    generator.gen()


if __name__ == '__main__':
    main()
