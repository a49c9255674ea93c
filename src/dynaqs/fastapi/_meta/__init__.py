from dynaqs import setupModule

config, logger = setupModule(__name__)
