# Services package.
#
# article_service  — the business-rule layer for Article: rejects duplicate
#                    inserts and passes everything else through to the
#                    repository.
#
# The service receives its repository through the constructor so the router
# layer (via ``articles_api.dependencies``) decides which store backs a request.
