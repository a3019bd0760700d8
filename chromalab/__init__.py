#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: chromalab/__init__.py

__version__ = "0.3.0"
