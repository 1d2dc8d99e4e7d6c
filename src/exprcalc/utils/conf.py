import sys

from exprcalc.utils._conf import ConfMod

# The module replaces itself in sys.modules with a ConfMod instance, so that
#   from exprcalc.utils import conf
#   level = conf.get('logging', 'log_level')
# works without creating an instance first. Sections are also available as
# attributes, e.g. conf.output.float_precision
sys.modules[__name__] = ConfMod(__name__)
