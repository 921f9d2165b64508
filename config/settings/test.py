from .base import *

DEBUG = False

# Testes nunca chamam o serviço real
TAX_REFORM_API_URL = 'http://tax-reform.test/api/'
