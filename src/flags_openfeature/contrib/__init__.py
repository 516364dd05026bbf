"""Optional integrations for flags-openfeature.

Available integrations:

- :mod:`flags_openfeature.contrib.logging`: OpenFeature hook for evaluation
  logging (structlog when installed, stdlib logging otherwise)
- :mod:`flags_openfeature.contrib.litestar`: Litestar plugin registering the
  provider with the OpenFeature API
"""
