# Services package.
#
# Each module exposes a focused set of async functions that resolve one
# resource's queries and mutations:
#
#   article_service  - listing with comment counts, detail, vote increments
#   comment_service  - per-article listing, insert, delete
#   topic_service    - topic listing and existence checks
#   user_service     - user listing, lookup and existence checks
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Absence is reported by raising the exceptions
# in ``news_api.errors``, never by returning None.
