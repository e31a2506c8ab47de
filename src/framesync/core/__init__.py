"""
framesync core: IR models, errors, settings and artifact storage.
"""
