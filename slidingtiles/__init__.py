# -*- coding: utf-8 -*-
"""
Sliding-tile puzzle on a square grid where equal powers of two merge.
"""
