"""GraphQL documents sent to AniList, one per tool."""

USER_QUERY = """
query UserQuery($username: String!) {
  User(name: $username) {
    name
    about
    statistics {
      anime { count }
      manga { count }
    }
  }
}"""

MEDIA_LIST_COLLECTION_QUERY = """
query MediaListCollectionQuery(
  $username: String!
  $type: MediaType!
  $chunk: Int
  $perChunk: Int
  $sort: [MediaListSort]
) {
  MediaListCollection(
    userName: $username
    type: $type
    chunk: $chunk
    perChunk: $perChunk
    sort: $sort
  ) {
    lists {
      entries {
        score
        notes
        media {
          id
          title { english romaji }
          genres
          tags { name }
          recommendations(sort: RATING_DESC, perPage: 10) {
            nodes {
              mediaRecommendation {
                id
                title { english romaji }
              }
            }
          }
        }
      }
    }
    hasNextChunk
  }
}"""

SEARCH_QUERY = """
query SearchQuery(
  $page: Int = 1
  $id: Int
  $type: MediaType
  $isAdult: Boolean = false
  $search: String
  $format: [MediaFormat]
  $status: MediaStatus
  $countryOfOrigin: CountryCode
  $source: MediaSource
  $season: MediaSeason
  $seasonYear: Int
  $year: String
  $onList: Boolean
  $yearLesser: FuzzyDateInt
  $yearGreater: FuzzyDateInt
  $episodeLesser: Int
  $episodeGreater: Int
  $durationLesser: Int
  $durationGreater: Int
  $chapterLesser: Int
  $chapterGreater: Int
  $volumeLesser: Int
  $volumeGreater: Int
  $licensedBy: [Int]
  $isLicensed: Boolean
  $genres: [String]
  $excludedGenres: [String]
  $tags: [String]
  $excludedTags: [String]
  $minimumTagRank: Int
  $sort: [MediaSort] = [POPULARITY_DESC, SCORE_DESC]
  $perPage: Int = 20
) {
  Page(page: $page, perPage: $perPage) {
    media(
      id: $id
      type: $type
      season: $season
      format_in: $format
      status: $status
      countryOfOrigin: $countryOfOrigin
      source: $source
      search: $search
      onList: $onList
      seasonYear: $seasonYear
      startDate_like: $year
      startDate_lesser: $yearLesser
      startDate_greater: $yearGreater
      episodes_lesser: $episodeLesser
      episodes_greater: $episodeGreater
      duration_lesser: $durationLesser
      duration_greater: $durationGreater
      chapters_lesser: $chapterLesser
      chapters_greater: $chapterGreater
      volumes_lesser: $volumeLesser
      volumes_greater: $volumeGreater
      licensedById_in: $licensedBy
      isLicensed: $isLicensed
      genre_in: $genres
      genre_not_in: $excludedGenres
      tag_in: $tags
      tag_not_in: $excludedTags
      minimumTagRank: $minimumTagRank
      sort: $sort
      isAdult: $isAdult
    ) {
      id
      title { romaji english }
      averageScore
      popularity
      genres
    }
  }
}"""

MEDIA_QUERY = """
query MediaQuery($id: Int!, $type: MediaType!) {
  Media(id: $id, type: $type) {
    id
    title { english romaji }
    description
    recommendations {
      nodes {
        mediaRecommendation {
          id
          title { english romaji }
          genres
          tags { name }
        }
      }
    }
  }
}"""
