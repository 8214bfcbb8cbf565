from articat.domain.article.util.di.provider import ArticleProvider

__all__ = ["ArticleProvider"]
