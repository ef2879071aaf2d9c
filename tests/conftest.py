# -*- coding: utf-8 -*-
import matplotlib

matplotlib.use('agg')
