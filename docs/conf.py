import os
import sys

sys.path.insert(0, os.path.abspath('..'))

import bosch_shc_api  # noqa: E402

project = 'bosch-shc-api'
author = 'bosch-shc-api contributors'
release = bosch_shc_api.__version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    'sphinx_autodoc_typehints',
]

autodoc_member_order = 'bysource'
autoclass_content = 'both'
napoleon_google_docstring = True
napoleon_numpy_docstring = False

html_theme = 'sphinx_rtd_theme'
exclude_patterns = ['_build']

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'requests': ('https://requests.readthedocs.io/en/latest/', None),
}
