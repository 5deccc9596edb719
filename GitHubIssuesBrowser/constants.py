GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "GitHubIssuesBrowser"
DEFAULT_PATH = "the-road-to-learn-react/the-road-to-learn-react"

ISSUES_PAGE_SIZE = 5
REACTIONS_LIMIT = 3
REQUEST_TIMEOUT_SECONDS = 20


class GQLOperations:
    GetIssuesOfRepository = {
        "operationName": "GetIssuesOfRepository",
        "query": """
            query GetIssuesOfRepository(
              $org: String!
              $repo: String!
              $cursor: String
              $issuesLimit: Int!
              $reactionsLimit: Int!
            ) {
              organization(login: $org) {
                name
                url
                repository(name: $repo) {
                  id
                  name
                  url
                  stargazers {
                    totalCount
                  }
                  viewerHasStarred
                  issues(first: $issuesLimit, after: $cursor, states: [OPEN]) {
                    edges {
                      node {
                        id
                        title
                        url
                        reactions(last: $reactionsLimit) {
                          edges {
                            node {
                              id
                              content
                            }
                          }
                          totalCount
                          pageInfo {
                            endCursor
                            hasNextPage
                          }
                        }
                      }
                    }
                    totalCount
                    pageInfo {
                      endCursor
                      hasNextPage
                    }
                  }
                }
              }
            }
        """,
    }
    AddStar = {
        "operationName": "AddStar",
        "query": """
            mutation AddStar($repoId: ID!) {
              addStar(input: { starrableId: $repoId }) {
                starrable {
                  viewerHasStarred
                }
              }
            }
        """,
    }
    RemoveStar = {
        "operationName": "RemoveStar",
        "query": """
            mutation RemoveStar($repoId: ID!) {
              removeStar(input: { starrableId: $repoId }) {
                starrable {
                  viewerHasStarred
                }
              }
            }
        """,
    }
