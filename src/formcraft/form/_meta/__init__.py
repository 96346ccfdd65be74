from formcraft import setupModule

config, logger = setupModule(__name__)
