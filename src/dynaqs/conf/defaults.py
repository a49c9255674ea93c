''' Package level defaults for the root [dynaqs] configuration section. '''

# Log every DynaQSException at the point it is raised.
DEBUG_APP_EXCEPTION = False
