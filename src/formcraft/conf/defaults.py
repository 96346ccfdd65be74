DEBUG_APP_EXCEPTION = False
