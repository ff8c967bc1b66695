"""Containers wiring every use case to its stores."""

from __future__ import annotations

from dataclasses import dataclass

from gsdx.domain.stores import StoryStore, TaskStore
from gsdx.usecases.story import CreateStory, DeleteStory, ListStories, UpdateStory
from gsdx.usecases.task import CreateTask, DeleteTask, ListTasks, UpdateTask


@dataclass(frozen=True)
class StoryUseCases:
    create_story: CreateStory
    list_stories: ListStories
    update_story: UpdateStory
    delete_story: DeleteStory

    @classmethod
    def build(cls, stories: StoryStore) -> StoryUseCases:
        return cls(
            create_story=CreateStory(stories),
            list_stories=ListStories(stories),
            update_story=UpdateStory(stories),
            delete_story=DeleteStory(stories),
        )


@dataclass(frozen=True)
class TaskUseCases:
    list_tasks: ListTasks
    create_task: CreateTask
    update_task: UpdateTask
    delete_task: DeleteTask

    @classmethod
    def build(cls, stories: StoryStore, tasks: TaskStore) -> TaskUseCases:
        return cls(
            list_tasks=ListTasks(stories, tasks),
            create_task=CreateTask(tasks),
            update_task=UpdateTask(tasks),
            delete_task=DeleteTask(tasks),
        )


@dataclass(frozen=True)
class UseCaseContext:
    """All use cases of the service, built once per process."""

    stories: StoryUseCases
    tasks: TaskUseCases

    @classmethod
    def build(cls, stories: StoryStore, tasks: TaskStore) -> UseCaseContext:
        return cls(
            stories=StoryUseCases.build(stories),
            tasks=TaskUseCases.build(stories, tasks),
        )
