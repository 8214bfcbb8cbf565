from dishka import Provider, provide

from articat.domain.article.service.article import ArticleService
from articat.domain.article.service.history import HistoryService
from articat.domain.article.service.restore import RestoreService
from articat.util.di.scope import Scope


class ArticleProvider(Provider):
    article_service = provide(ArticleService, scope=Scope.UOW)
    restore_service = provide(RestoreService, scope=Scope.UOW)
    history_service = provide(HistoryService, scope=Scope.UOW)
