from .Error import Error
from .Organization import FetchedPage, Issue, Organization, Reaction, Repository
from .Pagination import Connection, Edge, PageInfo
from .Star import StarMutationResponse
