
import json
import threading
from pathlib import Path


def _to_jsonable(x):
    if isinstance(x, Path):
        return str(x)
    return x


class NDJSONLogger:
    '''
    Append one JSON object per line. Safe to share between request threads.
    '''
    def __init__(self, path):
        path = Path(path).expanduser()
        path.parent.mkdir(exist_ok=True, parents=True)
        self.log_file = path.open('a')
        self._lock = threading.Lock()

    def record(self, event, **fields):
        fields = {k: _to_jsonable(v) for k, v in fields.items()}
        fields['event'] = event
        line = json.dumps(fields) + '\n'
        with self._lock:
            self.log_file.write(line)
            self.log_file.flush()

    def close(self):
        with self._lock:
            self.log_file.close()
