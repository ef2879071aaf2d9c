# -*- coding: utf-8 -*-
__versioninfo__ = (1, 0, 0)

__version__ = '.'.join(map(str, __versioninfo__))

__date__ = "19 Oct 2026"
