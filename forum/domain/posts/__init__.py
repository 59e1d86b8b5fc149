# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Comment, Post
from .repositories import CommentRepository, PostRepository

__all__ = ["Comment", "CommentRepository", "Post", "PostRepository"]
