import simpy
from typing import List

# Topics published by the dispatcher core
STATUS_TOPIC = "elevator/status"
REQUEST_ADDED_TOPIC = "requests/added"
REQUEST_SERVICED_TOPIC = "requests/serviced"
TRIP_TOPIC = "dispatcher/trip"
COMPLETED_TOPIC = "dispatcher/completed"


class MessageBroker:
    """
    Mediates communication between the dispatcher and its observers.
    Implements a topic-based publish-subscribe model.

    Every message is also copied to a broadcast pipe, which the Statistics
    recorder reads. Topic pipes are created by the first subscriber, so
    messages nobody listens to are not stored twice.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = False):
        """
        Initialize the message broker

        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Print every published message
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}  # Store per subscribed topic
        self.broadcast_pipe = simpy.Store(self.env)

    def get_pipe(self, topic: str) -> simpy.Store:
        """
        Get or create a communication pipe (Store) for the specified topic
        """
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def publish(self, topic: str, **fields):
        """
        Publish a message stamped with the current simulation time

        Returns:
            The message that was published
        """
        message = {"timestamp": self.env.now}
        message.update(fields)
        self.put(topic, message)
        return message

    def put(self, topic: str, message):
        """
        Publish (put) a message to the specified topic
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        if topic in self.topics:
            return self.topics[topic].put(message)
        return None

    def get(self, topic: str):
        """
        Wait to receive (get) a message from the specified topic

        Only messages published after the first get() for a topic are kept.
        """
        pipe = self.get_pipe(topic)
        return pipe.get()

    def drain_broadcasts(self) -> List[dict]:
        """
        Take every broadcast published so far without waiting

        Used by recorders that read after a run instead of running their own
        listener process.
        """
        drained = list(self.broadcast_pipe.items)
        self.broadcast_pipe.items.clear()
        return drained
