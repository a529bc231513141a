"""Stand-ins for use-cases and the navigator (same call surface, canned data)."""


class FakeMoviesUseCase:
    def __init__(self, movies_list=None, error=None):
        self.movies_list = movies_list
        self.error = error
        self.calls = []

    def load_movies(self, list_type, page=1):
        self.calls.append((list_type, page))
        if self.error is not None:
            raise self.error
        if self.movies_list is None:
            raise AssertionError("No fake data provided")
        return self.movies_list


class FakeMovieDetailsUseCase:
    def __init__(self, details=None, error=None):
        self.details = details
        self.error = error
        self.calls = []

    def load_movie_details(self, movie_id):
        self.calls.append(movie_id)
        if self.error is not None:
            raise self.error
        if self.details is None:
            raise AssertionError("No fake data provided")
        return self.details


class FakeConfigurationUseCase:
    def __init__(self, configuration=None):
        self.configuration = configuration

    def load_configuration(self):
        return self.configuration


class FakeNavigator:
    def __init__(self):
        self.visited = []

    def go_to_details(self, movie_id):
        self.visited.append(movie_id)




class DeferredDispatcher:
    """Holds each job until the test completes it, in whatever order it likes."""

    def __init__(self):
        self.pending = []

    def dispatch(self, job, on_success, on_failure):
        self.pending.append((job, on_success, on_failure))

    def complete(self, index):
        job, on_success, on_failure = self.pending[index]
        try:
            result = job()
        except Exception as e:
            on_failure(e)
        else:
            on_success(result)
