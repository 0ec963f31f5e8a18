import threading


class _Flight:
    def __init__(self):
        self.done = threading.Event()
        self.result = None
        self.error = None


class ResourceCache:
    """
    Read cache keyed by ``(resource path, user id)``.

    Identical reads that overlap share one fetch. Invalidating a key while its
    fetch is in flight keeps the (possibly stale) result out of the cache.
    """

    def __init__(self):
        self._entries = {}
        self._flights = {}
        self._generations = {}
        self._lock = threading.Lock()

    def get(self, key, fetch):
        with self._lock:
            if key in self._entries:
                return self._entries[key]
            flight = self._flights.get(key)
            leader = flight is None
            if leader:
                flight = _Flight()
                self._flights[key] = flight
                generation = self._generations.get(key, 0)

        if not leader:
            flight.done.wait()
            if flight.error is not None:
                raise flight.error
            return flight.result

        try:
            flight.result = fetch()
        except Exception as e:
            flight.error = e
            raise
        finally:
            with self._lock:
                if flight.error is None and self._generations.get(key, 0) == generation:
                    self._entries[key] = flight.result
                self._flights.pop(key, None)
            flight.done.set()
        return flight.result

    def is_loading(self, key):
        with self._lock:
            return key in self._flights

    def invalidate(self, key):
        with self._lock:
            self._entries.pop(key, None)
            self._generations[key] = self._generations.get(key, 0) + 1

    def clear(self):
        with self._lock:
            for key in list(self._entries) + list(self._flights):
                self._generations[key] = self._generations.get(key, 0) + 1
            self._entries.clear()
