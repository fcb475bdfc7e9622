"""Akkor 酒店预订后端"""
